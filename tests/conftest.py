"""
Konfiguracja pytest dla fst.

Dodaje katalog główny projektu do sys.path, żeby pakiety (data_model,
md_parser, file_search, fst) importowały się bez instalacji.
"""

import sys
from pathlib import Path

root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))
