"""Document readers turning uploaded PDF, DOCX and TXT resumes into plain text."""

import logging
import re
import zipfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional

from .dates import ANY_RANGE_RE
from .models import FileType


logger = logging.getLogger(__name__)


MIME_TYPES = {
    "application/pdf": FileType.PDF,
    "application/msword": FileType.DOCX,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": FileType.DOCX,
    "text/plain": FileType.TXT,
}

EXTENSIONS = {
    ".pdf": FileType.PDF,
    ".docx": FileType.DOCX,
    ".doc": FileType.DOCX,
    ".txt": FileType.TXT,
}

# Pages are separated by a blank line in the extracted text
PAGE_SEPARATOR = "\n\n"

_WORD_NS = {"w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main"}

_PAGE_FOOTER_RE = re.compile(r"^[\w.+-]+@[\w.-]+\s+\d+\s*/\s*\d+$")
_PAGE_NUMBER_RE = re.compile(r"^(?:\d+\s*/\s*\d+|Page\s+\d+(?:\s+of\s+\d+)?)$", re.IGNORECASE)
_PIPES_ONLY_RE = re.compile(r"^[|\s]+$")


def _is_date_only(line: str) -> bool:
    match = ANY_RANGE_RE.fullmatch(line.strip())
    return match is not None


def clean_extracted_text(text: str) -> str:
    """Clean up text extracted from PDF/DOCX files.

    Removes common artifacts from PDF extraction:
    - Page numbers and footers
    - Lines made only of pipe characters
    - Runs of blank lines (collapsed to one)

    A line holding nothing but a date range is appended to the line above
    it, so "Acme Corp" / "2019 - 2021" becomes one header line.

    Args:
        text: Raw extracted text

    Returns:
        Cleaned text
    """
    cleaned_lines: List[str] = []

    for line in text.split("\n"):
        line = line.strip()

        if not line:
            if cleaned_lines and cleaned_lines[-1] != "":
                cleaned_lines.append("")
            continue

        if _PAGE_FOOTER_RE.match(line) or _PAGE_NUMBER_RE.match(line):
            continue

        if _PIPES_ONLY_RE.match(line):
            continue

        line = re.sub(r"\|{2,}", " ", line)
        line = re.sub(r"\s*\|\s*", " | ", line)

        if _is_date_only(line) and cleaned_lines and cleaned_lines[-1]:
            cleaned_lines[-1] = f"{cleaned_lines[-1]} {line}"
            continue

        cleaned_lines.append(line)

    result = "\n".join(cleaned_lines)
    result = re.sub(r" {2,}", " ", result)
    return result.strip()


def detect_file_type(file_path: str, content_type: Optional[str] = None) -> Optional[FileType]:
    """Detect file type from the MIME type when given, else from the extension.

    Args:
        file_path: Path (or original filename) of the file
        content_type: Optional MIME type reported by the uploader

    Returns:
        FileType enum or None if unsupported
    """
    if content_type:
        mime = content_type.split(";")[0].strip().lower()
        if mime in MIME_TYPES:
            return MIME_TYPES[mime]

    return EXTENSIONS.get(Path(file_path).suffix.lower())


def _read_pdf_with_pypdf2(file_path: str) -> List[str]:
    import PyPDF2

    with open(file_path, "rb") as file:
        reader = PyPDF2.PdfReader(file)
        return [page.extract_text() or "" for page in reader.pages]


def _read_pdf_with_pdfplumber(file_path: str) -> List[str]:
    import pdfplumber

    with pdfplumber.open(file_path) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


def extract_text_from_pdf(file_path: str) -> str:
    """Extract text from a PDF file, one blank line between pages.

    Uses PyPDF2 as primary extractor, falls back to pdfplumber when PyPDF2
    fails or finds no text.

    Args:
        file_path: Path to the PDF file

    Returns:
        Extracted text or empty string on failure
    """
    try:
        pages = _read_pdf_with_pypdf2(file_path)
        text = PAGE_SEPARATOR.join(p.strip() for p in pages)
        if text.strip():
            return text
        logger.warning(f"PyPDF2 found no text in {file_path}, trying pdfplumber")
    except Exception as e:
        logger.warning(f"PyPDF2 failed: {e}, trying pdfplumber")

    try:
        pages = _read_pdf_with_pdfplumber(file_path)
        return PAGE_SEPARATOR.join(p.strip() for p in pages)
    except Exception as e:
        logger.error(f"Error extracting text from PDF: {e}")
        return ""


def extract_text_from_docx(file_path: str) -> str:
    """Extract text from a DOCX file, one line per paragraph.

    Reads word/document.xml straight from the OOXML zip container.

    Args:
        file_path: Path to the DOCX file

    Returns:
        Extracted text or empty string on failure
    """
    if not zipfile.is_zipfile(file_path):
        logger.warning(f"File is not a valid DOCX (zip) file: {file_path}")
        return ""

    try:
        with zipfile.ZipFile(file_path) as z:
            if "word/document.xml" not in z.namelist():
                logger.warning(f"DOCX missing word/document.xml: {file_path}")
                return ""
            xml_content = z.read("word/document.xml")
    except (zipfile.BadZipFile, OSError) as e:
        logger.error(f"Error reading DOCX archive: {e}")
        return ""

    try:
        tree = ET.fromstring(xml_content)
    except ET.ParseError as e:
        logger.error(f"Failed to parse DOCX XML: {e}")
        return ""

    paragraphs = []
    for paragraph in tree.iter(f"{{{_WORD_NS['w']}}}p"):
        runs = [t.text for t in paragraph.findall(".//w:t", _WORD_NS) if t.text]
        paragraphs.append("".join(runs))
    return "\n".join(paragraphs)


def extract_text_from_txt(file_path: str) -> str:
    """Extract text from a plain text file.

    Args:
        file_path: Path to the text file

    Returns:
        File contents or empty string on failure
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError:
        try:
            with open(file_path, "r", encoding="latin-1") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Error reading text file: {e}")
            return ""
    except OSError as e:
        logger.error(f"Error reading text file: {e}")
        return ""


def extract_text(file_path: str, content_type: Optional[str] = None, clean: bool = True) -> str:
    """Extract text from a file based on its type.

    Args:
        file_path: Path to the file
        content_type: Optional MIME type, preferred over the extension
        clean: Whether to clean up extraction artifacts (default True)

    Returns:
        Extracted text or empty string on failure

    Raises:
        ValueError: If file type is not supported
    """
    file_type = detect_file_type(file_path, content_type)

    if file_type is None:
        raise ValueError(f"Unsupported file type: {content_type or Path(file_path).suffix or file_path}")

    if file_type == FileType.PDF:
        text = extract_text_from_pdf(file_path)
    elif file_type == FileType.DOCX:
        text = extract_text_from_docx(file_path)
    else:
        text = extract_text_from_txt(file_path)

    if clean and text:
        text = clean_extracted_text(text)

    return text
