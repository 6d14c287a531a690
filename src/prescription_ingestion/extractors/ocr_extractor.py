# ============================================================================
# src/prescription_ingestion/extractors/ocr_extractor.py
# ============================================================================
"""
OCR Extraction for Scanned Prescriptions

Extracts text from image uploads (JPG, PNG, BMP, TIFF) with Tesseract
(via pytesseract) using the English language model by default.

Preprocessing follows the usual recipe for printed forms:
- Grayscale conversion
- Contrast enhancement
- Sharpening

Progress stages are reported to the log only.
"""

import io
from typing import Optional

import pytesseract
from PIL import Image, ImageEnhance, ImageFilter

from ..config import extraction_settings
from ..constants.format_types import FormatKind
from .base import BaseTextExtractor


class OCRExtractor(BaseTextExtractor):
    """
    Tesseract OCR over a single image.

    Config options:
        ocr_language: Tesseract language (default: extraction_settings.OCR_LANGUAGE)
        tesseract_cmd: Path to the tesseract binary
        enhance: Apply contrast/sharpen preprocessing (default: True)
    """

    failure_cause = "ocr-failed"

    def __init__(self, config=None):
        super().__init__(config)
        self.language = self.config.get('ocr_language', extraction_settings.OCR_LANGUAGE)
        self.enhance = self.config.get('enhance', True)

        tesseract_cmd: Optional[str] = self.config.get(
            'tesseract_cmd', extraction_settings.TESSERACT_CMD
        )
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    @property
    def format_kind(self) -> FormatKind:
        return FormatKind.IMAGE

    def extract(self, data: bytes) -> str:
        try:
            self._report_progress("loading image", 0.0)
            with Image.open(io.BytesIO(data)) as image:
                prepared = self.enhance_image(image) if self.enhance else image.convert('RGB')

                self._report_progress("recognizing text", 0.3)
                text = pytesseract.image_to_string(prepared, lang=self.language)
        except Exception as e:
            raise self._fail(
                "Failed to extract text from image. Please ensure the image is clear "
                "and contains readable text.",
                e,
            ) from e

        self._report_progress("done", 1.0)

        text = text.strip()
        if not text:
            raise self._fail("OCR found no readable text in the image")

        self.logger.info(f"OCR extracted {len(text)} chars (lang={self.language})")
        return text

    def enhance_image(self, image: Image.Image) -> Image.Image:
        """
        Enhance image quality for better OCR results.

        Args:
            image: PIL Image to enhance

        Returns:
            Enhanced grayscale PIL Image
        """
        if image.mode not in ('RGB', 'L'):
            image = image.convert('RGB')

        gray = image.convert('L') if image.mode == 'RGB' else image

        enhanced = ImageEnhance.Contrast(gray).enhance(1.5)
        return enhanced.filter(ImageFilter.SHARPEN)

    def _report_progress(self, stage: str, progress: float):
        self.logger.debug(f"OCR progress: {stage} ({progress:.0%})")
