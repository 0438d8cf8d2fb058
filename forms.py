from flask_wtf import FlaskForm
from wtforms import HiddenField, IntegerField, StringField
from wtforms.validators import DataRequired, InputRequired, Optional


class UserForm(FlaskForm):
    name = StringField("Name", validators=[DataRequired()])
    job = StringField("Job", validators=[DataRequired()])


class DeleteUserForm(FlaskForm):
    """Confirmation form; carries only the CSRF token."""


class PageJumpForm(FlaskForm):
    page = IntegerField("Go to page", validators=[InputRequired()])
    current_page = HiddenField("Current page", validators=[Optional()])
