"""
Transient user notifications (the portal's snackbars)
"""
from flask import flash, get_flashed_messages, jsonify


def notify_success(message):
    flash(message, 'success')


def notify_error(message):
    flash(message, 'error')


def notify_info(message):
    flash(message, 'info')


def pop_notifications():
    """Drain the notifications raised while handling this request"""
    return [
        {'category': category, 'message': message}
        for category, message in get_flashed_messages(with_categories=True)
    ]


def render_view(view=None, status=200, redirect=None):
    """Serialize a view model together with its notifications"""
    body = dict(view or {})
    if redirect:
        body['redirect'] = redirect
    body['notifications'] = pop_notifications()
    return jsonify(body), status


def validation_error(exc):
    """Turn a pydantic ValidationError into a 400 view listing every invalid field"""
    errors = {}
    for error in exc.errors():
        field = '.'.join(str(part) for part in error.get('loc', ())) or '__form__'
        errors.setdefault(field, []).append(error.get('msg', 'Invalid value'))
    return render_view({'errors': errors}, status=400)


def respond(result):
    """Serialize a view-controller result

    Results are plain dicts; the optional 'status_code' and 'redirect' keys
    steer the HTTP response and are not part of the body.
    """
    result = dict(result)
    status = result.pop('status_code', 200)
    redirect = result.pop('redirect', None)
    return render_view(result, status=status, redirect=redirect)


def failure(message, status_code=400, **view):
    """Error notification plus the view to render alongside it"""
    notify_error(message)
    view['status_code'] = status_code
    return view


def api_failure(exc, fallback, **view):
    """Report a backend error: its own message when it sent one, fallback otherwise"""
    return failure(exc.backend_message(fallback), status_code=exc.view_status, **view)
