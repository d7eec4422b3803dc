"""
Business logic for languages.

Languages are a plain catalog: ``code`` and ``name`` must each be
unique among languages that have not been deleted.  Creating a language
whose code belonged to a deleted row inserts a fresh row; deleted rows
are never revived.
"""

from ..schemas.language import LanguageRead
from .crud_service import CrudService


class LanguageService(CrudService):
    resource = "Language"
    read_model = LanguageRead
    unique_fields = ("code", "name")
    conflict_messages = {
        "code": "Language with this code already exists.",
        "name": "Language with this name already exists.",
    }
    nullable_fields = ("flag_url",)
