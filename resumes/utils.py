import logging
import os
import re

import docx
import PyPDF2
from django.conf import settings

from .models import Resume

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    'application/pdf',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}
ALLOWED_EXTENSIONS = {'.pdf', '.doc', '.docx'}

SKILLS_LIST = [
    "Python", "Java", "C++", "Django", "Flask", "SQL", "MySQL",
    "PostgreSQL", "HTML", "CSS", "JavaScript", "TypeScript", "React", "Node.js",
    "Machine Learning", "Data Science", "Spark", "Hadoop", "AWS", "Docker",
    "Kubernetes", "Git", "ETL", "Data Modeling",
]


def max_upload_bytes():
    return settings.RESUME_MAX_UPLOAD_MB * 1024 * 1024


def is_allowed_resume(uploaded_file):
    content_type = getattr(uploaded_file, 'content_type', None)
    if content_type in ALLOWED_CONTENT_TYPES:
        return True
    ext = os.path.splitext(uploaded_file.name or '')[1].lower()
    return ext in ALLOWED_EXTENSIONS


def extract_text_from_pdf(fileobj):
    reader = PyPDF2.PdfReader(fileobj)
    text = ""
    for page in reader.pages:
        text += (page.extract_text() or "") + "\n"
    return text


def extract_text_from_docx(fileobj):
    document = docx.Document(fileobj)
    return "\n".join(para.text for para in document.paragraphs)


def extract_skills(text):
    found = []
    for skill in SKILLS_LIST:
        if re.search(rf"(?<![\w+]){re.escape(skill)}(?![\w+])", text, re.IGNORECASE):
            found.append(skill)
    return ", ".join(found)


def extract_resume_text(field_file):
    """Best-effort text of a stored resume. ``.doc`` is not parsed."""
    ext = os.path.splitext(field_file.name)[1].lower()
    try:
        field_file.open('rb')
        try:
            if ext == '.pdf':
                return extract_text_from_pdf(field_file)
            if ext == '.docx':
                return extract_text_from_docx(field_file)
        finally:
            field_file.close()
    except Exception:
        logger.exception("Could not read resume %s", field_file.name)
    return ""


def save_resume(user, uploaded_file, request=None):
    """
    Store an uploaded resume, extract skills and point the user's
    profile at the file's public URL. Returns ``(resume, public_url)``.
    """
    resume = Resume(user=user)
    resume.file.save(uploaded_file.name, uploaded_file, save=False)
    resume.skills = extract_skills(extract_resume_text(resume.file))
    resume.save()

    public_url = resume.file.url
    if request is not None:
        public_url = request.build_absolute_uri(public_url)

    profile = user.profile
    profile.resume_url = public_url
    profile.save(update_fields=['resume_url', 'updated_at'])
    logger.info("Stored resume %s for user %s (%d skills)", resume.pk, user.pk, len(resume.skill_list))
    return resume, public_url
