from django.core.management.base import BaseCommand

from questions.models import Question, QuestionCategory

DEFAULT_BANK = {
    ("Technical", "Language, framework and systems knowledge"): [
        ("Explain Python generators", "What is a generator and when would you use one instead of a list?", "medium"),
        ("SQL joins", "Describe the difference between INNER JOIN and LEFT JOIN with an example.", "easy"),
        ("Designing an ETL pipeline", "How would you design an ETL pipeline that is safe to re-run?", "hard"),
    ],
    ("Behavioral", "Past experience and working style"): [
        ("Handling conflict", "Tell us about a time you disagreed with a teammate. How was it resolved?", "medium"),
        ("Learning quickly", "Describe a situation where you had to learn a new tool under a deadline.", "easy"),
    ],
    ("Problem Solving", "Reasoning through open-ended problems"): [
        ("Estimate a quantity", "How many interviews does a 50-person company run in a year? Walk through your estimate.", "medium"),
    ],
}


class Command(BaseCommand):
    help = "Seed the question bank with default categories and sample questions"

    def add_arguments(self, parser):
        parser.add_argument('--clear', action='store_true', help="Delete existing questions first")

    def handle(self, *args, **opts):
        if opts['clear']:
            deleted, _ = Question.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} existing rows")

        created = []
        for (name, description), questions in DEFAULT_BANK.items():
            category, _ = QuestionCategory.objects.get_or_create(name=name, defaults={'description': description})
            for title, content, difficulty in questions:
                obj, was_created = Question.objects.get_or_create(
                    title=title,
                    category=category,
                    defaults={'content': content, 'difficulty': difficulty},
                )
                if was_created:
                    created.append(obj.id)

        self.stdout.write(self.style.SUCCESS(
            f"Created {len(created)} questions: {created}"
        ))
