from django.contrib import admin

from .models import Question, QuestionCategory


@admin.register(QuestionCategory)
class QuestionCategoryAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'description')
    search_fields = ('name', 'description')


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ('id', 'short_title', 'category', 'difficulty', 'created_by', 'created_at')
    list_filter = ('difficulty', 'category')
    search_fields = ('title', 'content', 'category__name')
    readonly_fields = ('created_at', 'updated_at')
    autocomplete_fields = ('category',)

    def short_title(self, obj):
        return (obj.title or str(obj.id))[:80]
    short_title.short_description = 'Question'
