"""Validation endpoints for login and signup submissions."""

import logging

from flask import Blueprint, request, jsonify

from authforms.forms import LoginForm, SignupForm

logger = logging.getLogger(__name__)

bp = Blueprint('credentials', __name__)


def _bind(form_class):
    """Build a form from a JSON object body, or from posted form data.
    
    Non-string JSON values are treated as missing.
    
    Args:
        form_class: LoginForm or SignupForm.
        
    Returns:
        Form bound to the request data.
    """
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return form_class(data={
            key: value for key, value in payload.items()
            if isinstance(value, str)
        })
    return form_class(request.form)


def _validate(form, credential):
    """Answer with the form errors or the redacted credential.
    
    Args:
        form: Bound LoginForm or SignupForm.
        credential: The credential decoded from the same form.
        
    Returns:
        JSON response and status code.
    """
    if not form.validate():
        logger.info('Rejected %s: invalid fields %s',
                    type(credential).__name__, sorted(form.errors))
        return jsonify(errors=form.errors), 422
    
    logger.debug('Accepted %r', credential)
    return jsonify(email=credential.email, credential=repr(credential)), 200


@bp.route('/login', methods=['POST'])
def login():
    """Validate a login submission."""
    form = _bind(LoginForm)
    return _validate(form, form.as_login())


@bp.route('/signup', methods=['POST'])
def signup():
    """Validate a signup submission."""
    form = _bind(SignupForm)
    return _validate(form, form.as_signup())
