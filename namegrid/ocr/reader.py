"""OCR reader built on top of pytesseract and OpenCV.

This module provides:
- Building a cleaned DataFrame from pytesseract output.
- Grouping words into text blocks in engine order.
- Preprocessing images for OCR.

All functions include Doxygen-style documentation tags.
"""

from __future__ import annotations

from typing import Any, Dict, List

import cv2
import numpy as np
import pandas as pd
import pytesseract


def build_dataframe_from_tesseract(data: Dict[str, Any], conf_threshold: float = 0) -> pd.DataFrame:
    """Create and clean a DataFrame from pytesseract.image_to_data output.

    Doxygen:
    - @param data: Dict returned by `pytesseract.image_to_data(..., output_type=Output.DICT)`.
    - @param conf_threshold: Words with confidence at or below this value are dropped.
    - @return: Filtered DataFrame with columns including text, confidence, and geometry.
    """
    df = pd.DataFrame(data)
    df['conf'] = pd.to_numeric(df['conf'], errors='coerce').fillna(-1)
    df = df[df['conf'] > max(0, conf_threshold)].copy()
    df['text'] = df['text'].fillna('').astype(str).str.strip()
    df = df[df['text'] != '']
    return df


def group_words_to_blocks(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Group OCR words into block-level dicts, keeping Tesseract's block order.

    Words inside a block are ordered by paragraph, line and left edge, and
    joined with single spaces.

    Doxygen:
    - @param df: DataFrame produced by `build_dataframe_from_tesseract`.
    - @return: List of block dicts with text, x, y, width, height, confidence.
    """
    if df.empty:
        return []
    blocks: List[Dict[str, Any]] = []
    for _, g in df.groupby('block_num', sort=False):
        sort_cols = [c for c in ('par_num', 'line_num', 'left') if c in g.columns]
        g_sorted = g.sort_values(sort_cols, kind='stable')
        x = int(g_sorted['left'].min())
        y = int(g_sorted['top'].min())
        w = int((g_sorted['left'] + g_sorted['width']).max() - x)
        h = int((g_sorted['top'] + g_sorted['height']).max() - y)
        blocks.append({
            'text': ' '.join(g_sorted['text'].tolist()),
            'x': x,
            'y': y,
            'width': w,
            'height': h,
            'confidence': float(g_sorted['conf'].mean()),
        })
    return blocks


def preprocess_image_for_ocr(img_bgr: np.ndarray) -> np.ndarray:
    """Preprocess a BGR image to improve OCR accuracy.

    Doxygen:
    - @param img_bgr: Input image in BGR format.
    - @return: Preprocessed BGR image.
    """
    gray = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2GRAY)
    gray = cv2.bilateralFilter(gray, d=7, sigmaColor=50, sigmaSpace=50)
    th = cv2.adaptiveThreshold(gray, 255, cv2.ADAPTIVE_THRESH_GAUSSIAN_C,
                               cv2.THRESH_BINARY, 31, 10)
    th = cv2.medianBlur(th, 3)
    return cv2.cvtColor(th, cv2.COLOR_GRAY2BGR)


def ocr_text_blocks(img_bgr: np.ndarray, lang: str = 'eng', conf_threshold: int = 30) -> List[Dict[str, Any]]:
    """Run Tesseract OCR and return text blocks in engine order.

    Doxygen:
    - @param img_bgr: Input image in BGR format.
    - @param lang: Tesseract language(s), e.g. 'eng' or 'hun+eng'.
    - @param conf_threshold: Minimum word confidence to keep.
    - @return: List of block dicts (see `group_words_to_blocks`).
    """
    rgb = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB)
    data = pytesseract.image_to_data(rgb, lang=lang, output_type=pytesseract.Output.DICT)
    df = build_dataframe_from_tesseract(data, conf_threshold=conf_threshold)
    return group_words_to_blocks(df)
