from django.contrib import admin

from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('id', 'full_name', 'user', 'role', 'status', 'position', 'updated_at')
    list_filter = ('role', 'status')
    search_fields = ('full_name', 'user__username', 'user__email', 'position')
    readonly_fields = ('created_at', 'updated_at')

    actions = ['make_admin', 'make_candidate']

    def make_admin(self, request, queryset):
        updated = queryset.update(role='admin')
        self.message_user(request, f"{updated} profile(s) promoted to admin.")
    make_admin.short_description = "Set role: admin"

    def make_candidate(self, request, queryset):
        updated = queryset.update(role='candidate')
        self.message_user(request, f"{updated} profile(s) set to candidate.")
    make_candidate.short_description = "Set role: candidate"
