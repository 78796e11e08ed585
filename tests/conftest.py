import json
import pathlib

import pytest


@pytest.fixture
def write_lang(tmp_path: pathlib.Path):
    def _write(filename: str, document, directory: pathlib.Path = tmp_path) -> pathlib.Path:
        path = directory / filename
        if isinstance(document, str):
            path.write_text(document, "utf-8")
        else:
            path.write_text(json.dumps(document, ensure_ascii=False), "utf-8")
        return path

    return _write
