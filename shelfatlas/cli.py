"""
shelfatlas CLI - Command-line interface for building texture atlases
"""

import click
import logging
import sys
from shelfatlas import AtlasBuilder, __version__
from shelfatlas.exceptions import (
    AtlasWriteError,
    ImageCollectionError,
    ImageLoadError,
    NoImagesFoundError,
)
from shelfatlas.imaging import ATLAS_FILENAME


@click.command()
@click.version_option(version=__version__, prog_name='shelfatlas')
@click.option('--filedir', required=True, help='Directory containing image files (searched recursively)')
@click.option('--maxheight', default=1080, show_default=True, type=click.IntRange(min=0),
              help='Maximum height of the texture atlas (limits the width of each row)')
@click.option('--workers', default=None, type=click.IntRange(min=1), help='Number of image loading threads')
@click.option('--manifest', default=None, help='Also write a JSON manifest of placements to this path')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def cli(filedir, maxheight, workers, manifest, verbose):
    """
    shelfatlas - Pack images into a single texture atlas.

    Writes atlas.png to the current directory.

    Examples:
        shelfatlas --filedir sprites/
        shelfatlas --filedir sprites/ --maxheight 512 --manifest atlas.json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(name)s: %(message)s')

    try:
        builder = AtlasBuilder(row_width_limit=maxheight, max_workers=workers)
        result = builder.build(filedir)
        result.save(ATLAS_FILENAME)

        if manifest:
            result.save_manifest(manifest, image=ATLAS_FILENAME)
            if verbose:
                click.echo(f"Manifest saved to {manifest}")

        for line in result.report_lines(ATLAS_FILENAME):
            click.echo(line)

    except ImageCollectionError as e:
        click.secho(f"Error collecting image files: {e}", fg='red', err=True)
        sys.exit(1)
    except NoImagesFoundError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except ImageLoadError as e:
        click.secho(f"Error loading images: {e}", fg='red', err=True)
        sys.exit(1)
    except AtlasWriteError as e:
        click.secho(f"Error saving atlas: {e}", fg='red', err=True)
        sys.exit(1)
    except OSError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)
    except Exception as e:
        click.secho(f"Unexpected error: {e}", fg='red', err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
