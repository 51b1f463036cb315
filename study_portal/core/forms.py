"""
Request form loading
"""
from flask import request


def load_form(form_model):
    """Validate the request body (JSON, or classic form fields) against a form model

    Raises pydantic.ValidationError when the submission is invalid.
    """
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return form_model.model_validate(data or {})
