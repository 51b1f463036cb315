"""
View-state bookkeeping shared by the catalog, dashboard and course screens
"""
from datetime import datetime

DEFAULT_SORT = 'latest'


def _created_ts(course):
    created = course.created_at
    if created is None:
        return 0.0
    if created.tzinfo is None:
        return (created - datetime(1970, 1, 1)).total_seconds()
    return created.timestamp()


def sort_courses(courses, sort_by=DEFAULT_SORT):
    """Order courses for display; unknown sort keys fall back to newest first"""
    if sort_by == 'oldest':
        return sorted(courses, key=_created_ts)
    if sort_by == 'title-asc':
        return sorted(courses, key=lambda c: c.title.casefold())
    if sort_by == 'title-desc':
        return sorted(courses, key=lambda c: c.title.casefold(), reverse=True)
    return sorted(courses, key=_created_ts, reverse=True)


def paginate(items, page=0, page_size=12):
    """Slice one page out of items; page is zero-based"""
    page = max(page, 0)
    page_size = max(page_size, 1)
    start = page * page_size
    total = len(items)
    return {
        'items': items[start:start + page_size],
        'page': page,
        'page_size': page_size,
        'total': total,
        'total_pages': (total + page_size - 1) // page_size,
    }


def truncate(text, limit):
    if not text:
        return ''
    if len(text) <= limit:
        return text
    return text[:limit] + '...'


def needs_read_more(text, limit):
    return bool(text) and len(text) > limit


def linkedin_url(profile):
    """Normalise whatever the trainer typed into a full LinkedIn URL"""
    if not profile:
        return ''
    url = profile.strip()
    if not url:
        return ''
    if url.startswith('http://') or url.startswith('https://'):
        return url
    if url.startswith('www.') or url.startswith('linkedin.com'):
        return f'https://{url}'
    if 'linkedin.com' not in url:
        return f'https://www.linkedin.com/in/{url}'
    return f'https://{url}'


def int_arg(args, name, default, minimum=0, maximum=None):
    """Read a non-negative integer query parameter, tolerating garbage"""
    try:
        value = int(args.get(name, default))
    except (TypeError, ValueError):
        value = default
    value = max(value, minimum)
    if maximum is not None:
        value = min(value, maximum)
    return value


def course_card(course, category_map, description_limit=120):
    """Card view of a course as shown in the catalog and on the dashboard"""
    card = course.to_view()
    card['categoryName'] = category_map.get(course.category_id, 'Unknown')
    card['shortDescription'] = truncate(course.description, description_limit)
    card['showReadMore'] = needs_read_more(course.description, description_limit)
    return card
