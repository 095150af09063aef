def format_difficulty(difficulty):
    if not difficulty:
        return "N/A"
    return difficulty[:1].upper() + difficulty[1:]


def search_questions(questions, term):
    """Case-insensitive substring match on title, content or category name."""
    term = (term or '').strip().lower()
    if not term:
        return list(questions)

    matches = []
    for q in questions:
        category_name = q.category.name if q.category_id else ''
        if term in q.title.lower() or term in q.content.lower() or term in category_name.lower():
            matches.append(q)
    return matches
