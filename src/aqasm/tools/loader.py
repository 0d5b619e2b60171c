from pathlib import Path
import logging as lg

from aqasm.common.errors import SourceNotFound


def load_source(filepath: str | Path) -> list[str]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    if not filepath.is_file():
        raise SourceNotFound(f'File {filepath} does not exist')

    lg.debug(f'Loading source {filepath}')
    return filepath.read_text(encoding='utf-8').splitlines()
