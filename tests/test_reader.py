import pandas as pd

from namegrid.ocr.reader import (
    build_dataframe_from_tesseract,
    group_words_to_blocks,
)


def test_build_dataframe_from_tesseract_filters_empty_and_low_conf():
    data = {
        'level': [5, 5, 5],
        'page_num': [1, 1, 1],
        'block_num': [1, 1, 1],
        'par_num': [1, 1, 1],
        'line_num': [1, 1, 1],
        'word_num': [1, 2, 3],
        'left': [10, 30, 50],
        'top': [10, 10, 10],
        'width': [10, 10, 10],
        'height': [10, 10, 10],
        'conf': ['0', '85', '95'],
        'text': [' ', 'Hello', ''],
    }
    df = build_dataframe_from_tesseract(data)
    # Only one valid row should remain ('Hello')
    assert len(df) == 1
    assert df.iloc[0]['text'] == 'Hello'


def test_build_dataframe_from_tesseract_applies_conf_threshold():
    data = {
        'block_num': [1, 1],
        'par_num': [1, 1],
        'line_num': [1, 1],
        'left': [10, 40],
        'top': [10, 10],
        'width': [20, 20],
        'height': [10, 10],
        'conf': ['25', '80'],
        'text': ['blurry', 'Alice'],
    }
    df = build_dataframe_from_tesseract(data, conf_threshold=30)
    assert df['text'].tolist() == ['Alice']


def _make_df_for_blocks():
    # Tesseract reports block 2 before block 1 here; order must be kept.
    data = {
        'block_num': [2, 2, 2, 1],
        'par_num': [1, 1, 1, 1],
        'line_num': [1, 2, 1, 1],
        'left': [700, 700, 760, 0],
        'top': [12, 40, 10, 15],
        'width': [50, 60, 40, 80],
        'height': [12, 12, 14, 12],
        'conf': [80, 90, 95, 85],
        'text': ['Carol', 'Jones', 'Ann', 'Alice'],
    }
    return pd.DataFrame(data)


def test_group_words_to_blocks_keeps_engine_order():
    blocks = group_words_to_blocks(_make_df_for_blocks())
    assert [b['text'] for b in blocks] == ['Carol Ann Jones', 'Alice']


def test_group_words_to_blocks_geometry():
    blocks = group_words_to_blocks(_make_df_for_blocks())
    first = blocks[0]
    assert first['x'] == 700
    assert first['y'] == 10
    assert first['width'] == 100  # 760 + 40 - 700
    assert first['height'] == 42  # 40 + 12 - 10
    assert 0 <= first['confidence'] <= 100


def test_group_words_to_blocks_empty():
    assert group_words_to_blocks(pd.DataFrame()) == []
