from django import forms

from accounts.models import Profile


class CandidateStatusForm(forms.Form):
    status = forms.ChoiceField(choices=Profile.STATUS_CHOICES)
