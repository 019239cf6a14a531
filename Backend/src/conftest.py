import json
import re

import pytest
from django.conf import settings

_JSON_BLOCK_RE = re.compile(r"```json\n(.*?)```", flags=re.DOTALL)


@pytest.fixture
def note_examples():
    """Blocs ```json d'une note (docs/notes/<name>), dans l'ordre du fichier."""

    def _load(name):
        text = (settings.DOCS_DIR / name).read_text(encoding="utf-8")
        return [json.loads(block) for block in _JSON_BLOCK_RE.findall(text)]

    return _load
