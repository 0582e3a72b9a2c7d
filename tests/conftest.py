import io
from datetime import date

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from medfiling.extraction.models import ExtractedFields


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def report_pdf_bytes() -> bytes:
    """Generate a two-page radiology report."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle("Ultrasound report")
    c.drawString(72, 720, "iMED Radiology")
    c.drawString(72, 700, "Patient: Jane Citizen")
    c.showPage()
    c.drawString(72, 720, "SCROTAL ULTRASOUND")
    c.drawString(72, 700, "Referrer: Dr. John Smith")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def fixed_today() -> date:
    return date(2025, 3, 14)


@pytest.fixture()
def sample_fields() -> ExtractedFields:
    return ExtractedFields(
        patient_name="Jane Citizen",
        date_of_report="2025-01-10",
        subject="SCROTAL ULTRASOUND",
        contact_of_source="iMED Radiology",
        store_in="Investigations",
        doctor="Dr. John Smith",
        category="Medical imaging report",
    )
