# taskboss/db/types.py
import json
import logging

from sqlalchemy.types import Text, TypeDecorator

logger = logging.getLogger(__name__)


class JSONEncodedText(TypeDecorator):
    """
    Stores a JSON-serializable value in a TEXT column.

    SQLite has no native array or object type, so lists (goal tags,
    unlocked achievements) and dicts (AI model preferences) are kept as
    JSON text and decoded on load. A NULL or undecodable column loads as
    the empty value of the configured container type.
    """

    impl = Text
    cache_ok = True

    def __init__(self, container: type = list, *args, **kwargs):
        self.container = container
        super().__init__(*args, **kwargs)

    def process_bind_param(self, value, dialect):
        if value is None:
            value = self.container()
        return json.dumps(value, ensure_ascii=False)

    def process_result_value(self, value, dialect):
        if not value:
            return self.container()
        try:
            return json.loads(value)
        except ValueError:
            logger.warning(f"Discarding malformed JSON column value: {value[:100]}")
            return self.container()
