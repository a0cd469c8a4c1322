"""
Shared fixtures: small, well-formed sample documents.
"""
import pytest

from tests.samples import make_docx_bytes, make_pdf_bytes, make_xlsx_bytes


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_pdf_bytes("Quarterly report for the board")


@pytest.fixture
def docx_bytes() -> bytes:
    return make_docx_bytes(["Meeting notes", "Budget approved for Q3."])


@pytest.fixture
def xlsx_bytes() -> bytes:
    return make_xlsx_bytes({
        "Budget": [["Item", "Cost"], ["Rent", 1200]],
        "Empty": [],
    })


@pytest.fixture
def write_file(tmp_path):
    """Write bytes under tmp_path and return the path as a string."""
    def _write(name: str, data: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write
