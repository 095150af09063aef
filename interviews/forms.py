from django import forms
from django.contrib.auth import get_user_model

from accounts.models import Profile
from questions.models import Question
from .models import Interview

User = get_user_model()

DATETIME_INPUT_FORMATS = ['%Y-%m-%dT%H:%M', '%Y-%m-%d %H:%M', '%Y-%m-%d %H:%M:%S']


class CandidateChoiceField(forms.ModelChoiceField):
    def label_from_instance(self, obj):
        return f"{obj.profile.display_name} <{obj.email}>"


class ScheduleInterviewForm(forms.Form):
    title = forms.CharField(max_length=255, required=False)
    description = forms.CharField(widget=forms.Textarea(attrs={'rows': 4}), required=False)
    questions = forms.ModelMultipleChoiceField(
        queryset=Question.objects.none(), required=False, widget=forms.CheckboxSelectMultiple
    )
    candidate = CandidateChoiceField(queryset=User.objects.none(), required=False, empty_label="No candidate yet")
    start_time = forms.DateTimeField(
        required=False, input_formats=DATETIME_INPUT_FORMATS,
        widget=forms.DateTimeInput(attrs={'type': 'datetime-local'}),
    )
    end_time = forms.DateTimeField(
        required=False, input_formats=DATETIME_INPUT_FORMATS,
        widget=forms.DateTimeInput(attrs={'type': 'datetime-local'}),
    )
    location = forms.CharField(max_length=255, required=False)
    meeting_link = forms.URLField(required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['questions'].queryset = Question.objects.select_related('category').order_by('title')
        self.fields['candidate'].queryset = (
            User.objects.filter(profile__role=Profile.ROLE_CANDIDATE)
            .select_related('profile')
            .order_by('profile__full_name', 'email')
        )

    def clean(self):
        cleaned = super().clean()
        if not (cleaned.get('title') or '').strip() or not (cleaned.get('description') or '').strip():
            raise forms.ValidationError("Please fill in all required fields.")

        start, end = cleaned.get('start_time'), cleaned.get('end_time')
        if bool(start) != bool(end):
            raise forms.ValidationError("Provide both a start and an end time for the slot.")
        if start and end and end <= start:
            self.add_error('end_time', "End time must be after start time")
        return cleaned

    def slot_data(self):
        data = self.cleaned_data
        if not data.get('start_time'):
            return None
        return {
            'start_time': data['start_time'],
            'end_time': data['end_time'],
            'location': data.get('location') or None,
            'meeting_link': data.get('meeting_link') or None,
        }


class InterviewStatusForm(forms.ModelForm):
    class Meta:
        model = Interview
        fields = ['status', 'notes']
        widgets = {
            'notes': forms.Textarea(attrs={'rows': 3}),
        }
