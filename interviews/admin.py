# interviews/admin.py
from django.contrib import admin

from .models import Interview, InterviewParticipant, InterviewQuestion, InterviewSlot
from .utils import notify_participant


# ---------- Inlines ----------
class InterviewQuestionInline(admin.TabularInline):
    model = InterviewQuestion
    extra = 0
    autocomplete_fields = ('question',)
    readonly_fields = ('created_at',)


class InterviewSlotInline(admin.TabularInline):
    model = InterviewSlot
    extra = 0


class InterviewParticipantInline(admin.TabularInline):
    model = InterviewParticipant
    extra = 0
    raw_id_fields = ('user',)
    readonly_fields = ('notified_at', 'created_at')


# ---------- InterviewAdmin ----------
@admin.register(Interview)
class InterviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'status', 'question_count', 'created_by', 'created_at')
    list_filter = ('status', 'created_by')
    search_fields = ('title', 'description', 'notes')
    readonly_fields = ('created_at', 'updated_at')
    inlines = [InterviewQuestionInline, InterviewSlotInline, InterviewParticipantInline]
    ordering = ('-created_at',)

    fieldsets = (
        (None, {
            'fields': ('title', 'description', 'status', 'notes')
        }),
        ('Advanced', {
            'classes': ('collapse',),
            'fields': ('created_by', 'created_at', 'updated_at'),
        }),
    )

    actions = ['mark_completed', 'mark_cancelled']

    def question_count(self, obj):
        return obj.interview_questions.count()
    question_count.short_description = 'Questions'

    def mark_completed(self, request, queryset):
        updated = queryset.update(status=Interview.STATUS_COMPLETED)
        self.message_user(request, f"{updated} interview(s) marked completed.")
    mark_completed.short_description = "Mark selected completed"

    def mark_cancelled(self, request, queryset):
        updated = queryset.update(status=Interview.STATUS_CANCELLED)
        self.message_user(request, f"{updated} interview(s) cancelled.")
    mark_cancelled.short_description = "Cancel selected"


# ---------- Participant admin ----------
@admin.register(InterviewParticipant)
class InterviewParticipantAdmin(admin.ModelAdmin):
    list_display = ('id', 'interview', 'user', 'role', 'notified_at')
    list_filter = ('role',)
    search_fields = ('user__username', 'user__email', 'interview__title')
    readonly_fields = ('notified_at', 'created_at')

    actions = ['send_notification']

    def send_notification(self, request, queryset):
        for participant in queryset:
            notify_participant(participant)
        self.message_user(request, f"Queued notifications for {queryset.count()} participant(s).")
    send_notification.short_description = "Send interview notifications"
