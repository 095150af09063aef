from django import forms
from django.contrib.auth import get_user_model, password_validation

from .models import Profile

User = get_user_model()


class LoginForm(forms.Form):
    email = forms.EmailField(required=False)
    password = forms.CharField(widget=forms.PasswordInput, required=False)

    def clean(self):
        cleaned = super().clean()
        if not cleaned.get('email') or not cleaned.get('password'):
            raise forms.ValidationError("Please fill in all fields")
        return cleaned


class RegisterForm(forms.Form):
    full_name = forms.CharField(max_length=255, required=False)
    email = forms.EmailField(required=False)
    password1 = forms.CharField(widget=forms.PasswordInput, required=False)
    password2 = forms.CharField(widget=forms.PasswordInput, required=False)
    terms = forms.BooleanField(required=False)

    def clean_email(self):
        email = (self.cleaned_data.get('email') or '').strip().lower()
        if email and User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("An account with this email already exists")
        return email

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            return cleaned

        full_name = (cleaned.get('full_name') or '').strip()
        email = cleaned.get('email')
        pwd1 = cleaned.get('password1')
        pwd2 = cleaned.get('password2')

        if not full_name or not email or not pwd1:
            raise forms.ValidationError("Please fill in all required fields")
        if pwd1 != pwd2:
            raise forms.ValidationError("Passwords do not match")
        if not cleaned.get('terms'):
            raise forms.ValidationError("You must agree to the terms and conditions")

        password_validation.validate_password(pwd1, User(username=email, email=email))
        cleaned['full_name'] = full_name
        return cleaned

    def save(self):
        data = self.cleaned_data
        parts = data['full_name'].split(' ', 1)
        user = User.objects.create_user(
            username=data['email'],
            email=data['email'],
            password=data['password1'],
            first_name=parts[0][:150],
            last_name=(parts[1] if len(parts) > 1 else '')[:150],
        )
        profile = user.profile
        profile.full_name = data['full_name']
        profile.role = Profile.ROLE_CANDIDATE
        profile.save(update_fields=['full_name', 'role', 'updated_at'])
        return user


class ProfileSettingsForm(forms.ModelForm):
    class Meta:
        model = Profile
        fields = ['full_name', 'phone', 'position']
