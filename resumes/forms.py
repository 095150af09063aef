from django import forms
from django.conf import settings

from .models import Resume
from .utils import is_allowed_resume, max_upload_bytes


class ResumeForm(forms.ModelForm):
    class Meta:
        model = Resume
        fields = ['file']  # only file upload allowed

    def clean_file(self):
        uploaded = self.cleaned_data.get('file')
        if not uploaded:
            raise forms.ValidationError("Please choose a file to upload")
        if not is_allowed_resume(uploaded):
            raise forms.ValidationError("Please upload a PDF or Word document")
        if uploaded.size > max_upload_bytes():
            raise forms.ValidationError(
                f"File size should be less than {settings.RESUME_MAX_UPLOAD_MB}MB"
            )
        return uploaded
