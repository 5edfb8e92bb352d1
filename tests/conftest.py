"""Configuração do pytest para o File Gateway."""

import sys
from pathlib import Path

# src/ para imports absolutos (app, api, config, utils); raiz para tests.fakes
_root = Path(__file__).parent.parent
for path in (_root / "src", _root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
