import subprocess
from pathlib import Path

import pytest

from yapscad import settings
from yapscad.io.scad import InvokerError, ScadInvoker, scad_path, scad_text, write_scad
from yapscad.settings import OutputSettings
from yapscad.solids import Cube

BODY = 'cube(size = [1.00, 1.00, 1.00], center = false);\n'


def _settings(call=True):
    return OutputSettings(header='/* test */', render_name='main',
                          call_render_function=call, openscad_path='openscad')


def test_scad_path():
    assert scad_path('part') == Path('part.scad')
    assert scad_path('part.scad') == Path('part.scad')
    assert scad_path(Path('out') / 'part') == Path('out/part.scad')


def test_scad_text():
    text = scad_text(Cube(1), _settings())
    assert text == ('/* test */\n'
                    'module main()\n'
                    '{\n'
                    '    ' + BODY +
                    '}\n'
                    'main();\n')


def test_scad_text_without_call():
    text = scad_text(Cube(1), _settings(call=False))
    assert not text.rstrip().endswith('main();')
    assert text.endswith('}\n')


def test_write_scad(tmp_path: Path):
    invoker = write_scad(Cube(1), tmp_path / 'part', _settings())
    target = tmp_path / 'part.scad'
    assert invoker.path == target
    assert target.read_text() == scad_text(Cube(1), _settings())


def test_to_file_uses_current_settings(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(settings, '_current', _settings(call=False))
    invoker = Cube(1).to_file(tmp_path / 'box.scad')
    text = invoker.path.read_text()
    assert text.startswith('/* test */\nmodule main()\n')
    assert 'main();' not in text
    assert not (tmp_path / 'box.scad.scad').exists()


def test_export_runs_openscad(tmp_path: Path, monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0, b'', b'')

    monkeypatch.setattr(subprocess, 'run', fake_run)
    invoker = ScadInvoker(tmp_path / 'part.scad')
    out = invoker.export(tmp_path / 'part.stl')
    assert out == tmp_path / 'part.stl'
    assert calls == [['openscad', '-o', str(tmp_path / 'part.stl'),
                      str(tmp_path / 'part.scad')]]


def test_export_failure(tmp_path: Path, monkeypatch):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(1, cmd, b'', b'Parser error')

    monkeypatch.setattr(subprocess, 'run', fake_run)
    with pytest.raises(InvokerError, match='Parser error'):
        ScadInvoker(tmp_path / 'part.scad').export(tmp_path / 'part.stl')


def test_missing_executable(tmp_path: Path):
    invoker = ScadInvoker(tmp_path / 'part.scad', executable=str(tmp_path / 'no-openscad'))
    with pytest.raises(InvokerError):
        invoker.open()
    with pytest.raises(InvokerError):
        invoker.export(tmp_path / 'part.stl')


def test_open_launches(tmp_path: Path, monkeypatch):
    launched = []

    class FakePopen:
        def __init__(self, cmd):
            launched.append(cmd)

    monkeypatch.setattr(subprocess, 'Popen', FakePopen)
    proc = ScadInvoker(tmp_path / 'part.scad', 'viewer').open()
    assert isinstance(proc, FakePopen)
    assert launched == [['viewer', str(tmp_path / 'part.scad')]]
