import zipfile

import pytest

from services.resume_parser import readers
from services.resume_parser.models import FileType
from services.resume_parser.readers import (
    clean_extracted_text,
    detect_file_type,
    extract_text,
    extract_text_from_docx,
    extract_text_from_pdf,
)


DOCUMENT_XML = (
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    "<w:body>"
    "<w:p><w:r><w:t>Jane</w:t></w:r><w:r><w:t xml:space=\"preserve\"> Doe</w:t></w:r></w:p>"
    "<w:p><w:r><w:t>Python Developer</w:t></w:r></w:p>"
    "</w:body>"
    "</w:document>"
)


def _write_docx(path):
    with zipfile.ZipFile(path, "w") as z:
        z.writestr("word/document.xml", DOCUMENT_XML)
    return str(path)


def test_detect_file_type_by_extension():
    assert detect_file_type("resume.pdf") == FileType.PDF
    assert detect_file_type("resume.DOCX") == FileType.DOCX
    assert detect_file_type("resume.txt") == FileType.TXT
    assert detect_file_type("notes.md") is None


def test_detect_file_type_prefers_mime_type():
    assert detect_file_type("upload.bin", "application/pdf") == FileType.PDF
    assert detect_file_type("upload", "application/msword") == FileType.DOCX
    # Unknown MIME types fall back to the extension
    assert detect_file_type("resume.txt", "application/octet-stream") == FileType.TXT


def test_unsupported_type_raises(tmp_path):
    path = tmp_path / "resume.md"
    path.write_text("# Jane Doe")
    with pytest.raises(ValueError, match="Unsupported file type"):
        extract_text(str(path))


def test_extract_text_from_txt(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text("Jane Doe\n\n\n\njane@example.com\n", encoding="utf-8")
    assert extract_text(str(path)) == "Jane Doe\n\njane@example.com"


def test_extract_text_from_docx_paragraphs(tmp_path):
    path = _write_docx(tmp_path / "resume.docx")
    assert extract_text_from_docx(path) == "Jane Doe\nPython Developer"


def test_docx_by_content_type(tmp_path):
    path = _write_docx(tmp_path / "upload")
    text = extract_text(path, content_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document")
    assert text == "Jane Doe\nPython Developer"


def test_invalid_docx_gives_empty_text(tmp_path):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"not a zip archive")
    assert extract_text_from_docx(str(path)) == ""


def test_pdf_pages_joined_by_blank_line(monkeypatch):
    monkeypatch.setattr(readers, "_read_pdf_with_pypdf2", lambda path: ["Page one", "Page two"])
    assert extract_text_from_pdf("resume.pdf") == "Page one\n\nPage two"


def test_pdf_falls_back_to_pdfplumber(monkeypatch):
    def broken(path):
        raise OSError("cannot read")

    monkeypatch.setattr(readers, "_read_pdf_with_pypdf2", broken)
    monkeypatch.setattr(readers, "_read_pdf_with_pdfplumber", lambda path: ["Jane Doe"])
    assert extract_text_from_pdf("resume.pdf") == "Jane Doe"


def test_corrupt_pdf_gives_empty_text(tmp_path):
    path = tmp_path / "resume.pdf"
    path.write_bytes(b"%PDF-garbage")
    assert extract_text_from_pdf(str(path)) == ""


def test_clean_extracted_text():
    raw = "Acme Corp\n2019 - 2021\n\n\n\nPage 1 of 2\n|||\nBuilt  APIs"
    assert clean_extracted_text(raw) == "Acme Corp 2019 - 2021\n\nBuilt APIs"
