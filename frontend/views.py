# frontend/views.py
from django.shortcuts import redirect, render


def home(request):
    if request.user.is_authenticated:
        return redirect('dashboard')
    return render(request, 'home.html')


def page_not_found(request, exception=None):
    return render(request, '404.html', status=404)
