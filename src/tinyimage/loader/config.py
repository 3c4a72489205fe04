from pathlib import Path
import logging as lg
import tomllib

from tinyimage.common.hwconf import BYTE_ORDERS
from tinyimage.common.errors import ConfigurationError


class LoaderSettings:
    byte_order: str
    dump_program: bool

    def __init__(self, byte_order: str, dump_program: bool):
        self.byte_order = byte_order
        self.dump_program = dump_program

    def update(
        self,
        byte_order: str | None = None,
        dump_program: bool | None = None
    ):
        if byte_order is not None:
            self.byte_order = byte_order

        if dump_program is not None:
            self.dump_program = dump_program

        return self


def get_setting(config: dict, table: str, key: str, kind: type):
    section = config.get(table)

    if not isinstance(section, dict) or key not in section:
        raise ConfigurationError(f'Missing setting {table}.{key}')

    value = section[key]

    if not isinstance(value, kind):
        raise ConfigurationError(
            f'Setting {table}.{key} must be {kind.__name__}, got {value!r}'
        )

    return value


def parse_settings(contents: str) -> LoaderSettings:
    try:
        config = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f'Malformed configuration: {e}') from e

    byte_order = get_setting(config, 'image', 'byte_order', str)

    if byte_order not in BYTE_ORDERS:
        raise ConfigurationError(
            f'Setting image.byte_order must be one of {", ".join(BYTE_ORDERS)}, got {byte_order!r}'
        )

    dump_program = get_setting(config, 'debug', 'dump_program', bool)
    return LoaderSettings(byte_order, dump_program)


def load_settings(filepath: str | Path) -> LoaderSettings:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Reading settings from {filepath}')

    try:
        contents = filepath.read_text()
    except OSError as e:
        raise ConfigurationError(f'Cannot read configuration {filepath}: {e.strerror}') from e

    return parse_settings(contents)
