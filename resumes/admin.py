from django.contrib import admin

from .models import Resume


@admin.register(Resume)
class ResumeAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'file', 'skills', 'uploaded_at')
    search_fields = ('user__username', 'user__email', 'skills')
    readonly_fields = ('uploaded_at',)
