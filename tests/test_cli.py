"""
Tests for shelfatlas CLI

These tests verify option handling, the console report and exit codes.
"""

import json
import os
from pathlib import Path
from click.testing import CliRunner
from PIL import Image
from shelfatlas.cli import cli


class TestCLI:
    """Test CLI command structure and basic functionality"""

    def test_cli_help(self):
        """Test that CLI help works"""
        runner = CliRunner()
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'shelfatlas' in result.output
        assert '--filedir' in result.output
        assert '--maxheight' in result.output
        assert '--manifest' in result.output

    def test_cli_version(self):
        """Test that version flag works"""
        runner = CliRunner()
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_missing_filedir(self):
        """Test that --filedir is required"""
        runner = CliRunner()
        result = runner.invoke(cli, [])
        assert result.exit_code != 0
        assert 'filedir' in result.output.lower()

    def test_negative_maxheight_rejected(self, sprite_dir):
        runner = CliRunner()
        result = runner.invoke(cli, ['--filedir', str(sprite_dir), '--maxheight', '-5'])
        assert result.exit_code != 0

    def test_pack_writes_atlas_and_report(self, sprite_dir):
        """Test a full run in a scratch working directory"""
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--filedir', str(sprite_dir), '--maxheight', '200'])

            if result.exit_code != 0:
                print(f"Output: {result.output}")
            assert result.exit_code == 0
            assert 'Atlas size: 150 x 100' in result.output
            assert 'ID: 2, Rect: (110,0)-(150,80)' in result.output
            assert 'Atlas saved as atlas.png successfully.' in result.output

            with Image.open('atlas.png') as atlas:
                assert atlas.size == (150, 100)

    def test_report_lists_ids_in_order(self, sprite_dir):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--filedir', str(sprite_dir)])
            ids = [line.split(',')[0] for line in result.output.splitlines() if line.startswith('ID:')]
            assert ids == ['ID: 1', 'ID: 2', 'ID: 3']

    def test_manifest_option(self, sprite_dir):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [
                '--filedir', str(sprite_dir),
                '--maxheight', '200',
                '--manifest', 'atlas.json',
            ])
            assert result.exit_code == 0
            with open('atlas.json') as f:
                manifest = json.load(f)
            assert manifest['resolution'] == [150, 100]
            assert len(manifest['entries']) == 3

    def test_missing_directory_exits_nonzero(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--filedir', str(tmp_path / 'nonexistent')])
            assert result.exit_code == 1
            assert 'Error collecting image files' in result.output
            assert not Path('atlas.png').exists()

    def test_empty_directory_exits_nonzero(self, tmp_path):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--filedir', str(tmp_path)])
            assert result.exit_code == 1
            assert 'No image files found' in result.output

    def test_corrupt_image_exits_nonzero(self, sprite_dir):
        (sprite_dir / 'broken.png').write_bytes(b'not an image')
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--filedir', str(sprite_dir)])
            assert result.exit_code == 1
            assert 'Error loading images' in result.output
            assert 'broken.png' in result.output
            assert not os.path.exists('atlas.png')

    def test_workers_option(self, sprite_dir):
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ['--filedir', str(sprite_dir), '--workers', '1', '-v'])
            assert result.exit_code == 0
