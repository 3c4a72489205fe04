import sys
from pathlib import Path
import logging as lg

import click

from tinyimage.common.errors import LoaderError
import tinyimage.loader.config as config
import tinyimage.loader.image as image
import tinyimage.loader.program as program


EXIT_LOAD_ERROR = 2


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-c', '--config', 'config_path', type=Path, required=True,
              help='TOML file with image and debug settings')
@click.option('--dump/--no-dump', default=None, help='Overrides debug.dump_program')
@click.argument('source', type=Path)
@click.argument('binary', type=Path)
def build(verbose: bool, config_path: Path, dump: bool | None, source: Path, binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('TINYIMAGE')

    try:
        settings = config.load_settings(config_path).update(dump_program=dump)
        prog = program.load_program(source)
        listing = program.dump_program(prog, settings.dump_program)

        if listing:
            click.echo(listing, nl=False)

        bytestr = image.encode_image(prog, settings.byte_order)
    except LoaderError as e:
        lg.error(e)
        sys.exit(EXIT_LOAD_ERROR)

    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)
    lg.info(f'Wrote {len(bytestr)} bytes to {binary}')


if __name__ == "__main__":
    build()
