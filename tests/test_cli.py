"""
End-to-end CLI tests for cratos.

These tests build real git modules in temporary directories and invoke
the click entry point with CRATOS_PATH pointed at them.
"""
import json
import os
import shutil
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

import pytest
from click.testing import CliRunner

from cratos import __version__
from cratos.cli import cli
from cratos.commands import USAGE, get_usage
from cratos.exit_codes import CONFIG_ERROR, DATA_ERROR, SUCCESS, VCS_ERROR

GIT_AVAILABLE = shutil.which("git") is not None

PROJECTS = ['a/project', 'b/c/project', 'project']


class CLITestBase(unittest.TestCase):
    """Base class for CLI tests with common setup/teardown."""

    @pytest.fixture(autouse=True)
    def _module_factories(self, create_project, create_fake_module, run_git):
        self.create_project = create_project
        self.create_fake_module = create_fake_module
        self.run_git = run_git

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)
        self.runner = CliRunner()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def invoke(self, *args, env=None):
        environ = {'CRATOS_PATH': self.temp_dir}
        environ.update(env or {})
        return self.runner.invoke(cli, list(args), env=environ)


class TestBuiltins(CLITestBase):

    def test_no_arguments_prints_usage(self):
        result = self.invoke()
        self.assertEqual(result.exit_code, SUCCESS)
        self.assertEqual(result.stdout, get_usage())

    def test_help_flags(self):
        for flag in ('-h', '--help'):
            with self.subTest(flag=flag):
                result = self.invoke(flag)
                self.assertEqual(result.exit_code, SUCCESS)
                self.assertEqual(result.stdout, get_usage())

    def test_version_flags(self):
        for flag in ('-v', '--version'):
            with self.subTest(flag=flag):
                result = self.invoke(flag)
                self.assertEqual(result.stdout, f"v{__version__}\n")

    def test_version_beats_help(self):
        self.assertEqual(self.invoke('--help', '--version').stdout, f"v{__version__}\n")
        self.assertEqual(self.invoke('--version', '--help').stdout, f"v{__version__}\n")

    def test_unknown_command_is_not_an_error(self):
        result = self.invoke('frobnicate')
        self.assertEqual(result.exit_code, SUCCESS)
        self.assertEqual(result.stdout, f"frobnicate is not a cratos command\n{USAGE}\n")

    def test_unrecognized_flags_are_ignored(self):
        result = self.invoke('--frob', 'ls')
        self.assertEqual(result.exit_code, SUCCESS)
        self.assertEqual(result.stdout, "")

    def test_version_needs_no_roots(self):
        result = self.invoke('-v', env={'CRATOS_PATH': None, 'HOME': None})
        self.assertEqual(result.exit_code, SUCCESS)


class TestRootErrors(CLITestBase):

    def test_no_root_source_fails(self):
        result = self.invoke('list', env={'CRATOS_PATH': None, 'HOME': None})
        self.assertEqual(result.exit_code, CONFIG_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn("no entrypoint found", result.output)

    def test_invalid_setting_fails(self):
        result = self.invoke('list', env={'CRATOS_WORKERS': 'lots'})
        self.assertEqual(result.exit_code, CONFIG_ERROR)

    def test_invalid_settings_do_not_affect_builtins(self):
        env = {'CRATOS_WORKERS': 'lots', 'CRATOS_GIT_TIMEOUT': '-1'}
        self.assertEqual(self.invoke('--version', env=env).stdout, f"v{__version__}\n")
        self.assertEqual(self.invoke('--help', env=env).stdout, get_usage())
        result = self.invoke('frobnicate', env=env)
        self.assertEqual(result.exit_code, SUCCESS)


class TestEmptyRoots(CLITestBase):

    def test_commands_print_nothing(self):
        (self.root / 'empty').mkdir()
        for command in ('list', 'ls', 'status', 's', 'branch', 'b'):
            with self.subTest(command=command):
                result = self.invoke(command)
                self.assertEqual(result.exit_code, SUCCESS)
                self.assertEqual(result.stdout, "")

    def test_bad_manifest_aborts(self):
        self.create_fake_module(self.root / 'broken')
        (self.root / 'broken' / 'package.json').write_text('{not json')
        result = self.invoke('list')
        self.assertEqual(result.exit_code, DATA_ERROR)
        self.assertEqual(result.stdout, "")


@unittest.skipUnless(GIT_AVAILABLE, "git executable not available")
class TestModuleCommands(CLITestBase):

    def setUp(self):
        super().setUp()
        for rel in PROJECTS:
            self.create_project(self.root / rel)
        (self.root / 'empty').mkdir()

    def test_list(self):
        for command in ('list', 'ls'):
            with self.subTest(command=command):
                result = self.invoke(command)
                self.assertEqual(result.exit_code, SUCCESS, result.output)
                self.assertEqual(result.stdout, "ayo-0.0.1\nayo-0.0.1\nayo-0.0.1\n")

    def test_status(self):
        expected = "ayo ?? index.js\nayo ?? package.json\n" * 3
        for command in ('status', 's'):
            with self.subTest(command=command):
                self.assertEqual(self.invoke(command).stdout, expected)

    def test_branch(self):
        expected = "ayo No commits yet on master\n" * 3
        for command in ('branch', 'b'):
            with self.subTest(command=command):
                self.assertEqual(self.invoke(command).stdout, expected)

    def test_path_flag_overrides_environment(self):
        result = self.invoke(f'--path={self.root / "a"}', 'ls', env={'CRATOS_PATH': '/nonexistent'})
        self.assertEqual(result.stdout, "ayo-0.0.1\n")

    def test_colon_delimited_roots(self):
        roots = f"{self.root / 'a'}:{self.root / 'b'}"
        self.assertEqual(self.invoke('ls', env={'CRATOS_PATH': roots}).stdout, "ayo-0.0.1\nayo-0.0.1\n")

    def test_overlapping_roots_report_once(self):
        roots = f"{self.temp_dir}:{self.root / 'a'}"
        self.assertEqual(self.invoke('ls', env={'CRATOS_PATH': roots}).stdout, "ayo-0.0.1\n" * 3)

    def test_home_fallback(self):
        result = self.invoke('ls', env={'CRATOS_PATH': None, 'HOME': self.temp_dir})
        self.assertEqual(result.exit_code, SUCCESS)
        self.assertEqual(result.stdout, "ayo-0.0.1\n" * 3)

    def test_distinct_manifests(self):
        other = self.root / 'zzz'
        self.create_project(other, name='zed', version='9.9.9')
        self.assertEqual(self.invoke('ls').stdout, "ayo-0.0.1\n" * 3 + "zed-9.9.9\n")

    def test_non_utf8_branch_is_reported(self):
        self.run_git(self.root / 'project', 'checkout', '-b', b'caf\xe9')
        result = self.invoke('branch')
        self.assertEqual(result.exit_code, SUCCESS, result.output)
        self.assertIn("ayo No commits yet on caf\ufffd\n", result.stdout)

    def test_broken_repository_aborts(self):
        broken = self.root / 'broken'
        broken.mkdir()
        (broken / '.git').write_text('gitdir: /does/not/exist\n')
        (broken / 'package.json').write_text(json.dumps({'name': 'x', 'version': '1'}))
        result = self.invoke('branch')
        self.assertEqual(result.exit_code, VCS_ERROR)
        self.assertEqual(result.stdout, "")
        self.assertIn("fatal", result.output)


class TestModuleEntryPoint(unittest.TestCase):

    def test_python_dash_m_version(self):
        project_root = Path(__file__).parent.parent.absolute()
        env = os.environ.copy()
        env['PYTHONPATH'] = str(project_root)
        result = subprocess.run(
            [sys.executable, '-m', 'cratos', '--version'],
            capture_output=True,
            text=True,
            env=env,
            timeout=60,
        )
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout, f"v{__version__}\n")


if __name__ == '__main__':
    unittest.main()
