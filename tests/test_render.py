import locale

from yapscad.poly import Polygon
from yapscad.render import (StatementBuilder, block, fmt2, fmtlist, fmtnum,
                            fmtstr, indent, module_block, single_statement,
                            statement)
from yapscad.solids import Cube
from yapscad.spatial import Vector3


def test_fmt2():
    assert fmt2(3.14159) == '3.14'
    assert fmt2(2) == '2.00'
    assert fmt2(-0.5) == '-0.50'
    assert fmt2(-0.0) == '0.00'
    assert fmt2(-0.004) == '0.00'
    assert fmt2(-0.005001) == '-0.01'


def test_fmtnum_full_precision():
    assert fmtnum(1) == '1'
    assert fmtnum(1.0) == '1'
    assert fmtnum(0.1) == '0.1'
    assert fmtnum(2.125) == '2.125'
    assert fmtnum(1.0 / 3.0) == '0.3333333333333333'
    assert fmtnum(1e-20) == '1e-20'
    assert fmtnum(True) == 'true'
    assert fmtnum(False) == 'false'


def test_fmtstr_and_list():
    assert fmtstr('red') == '"red"'
    assert fmtstr('a"b') == '"a\\"b"'
    assert fmtlist([[0, 0.5], [1, 2]]) == '[[0,0.5],[1,2]]'


def test_statement_builder():
    sb = StatementBuilder('cylinder')
    sb.add('h', 2).add('r', 0.5).add('center', True).add('$fn', None)
    assert sb.keyword == 'cylinder'
    assert sb.call() == 'cylinder(h = 2, r = 0.5, center = true)'
    assert sb.statement() == 'cylinder(h = 2, r = 0.5, center = true);\n'
    assert str(StatementBuilder('color').add(None, 'red').add(None, 1.0)) == 'color("red", 1)'


def test_indent():
    assert indent('a;\nb;\n') == '    a;\n    b;\n'
    assert indent('a;\n\nb;', 2) == '        a;\n\n        b;'


def test_statement_and_blocks():
    assert statement('cube()') == 'cube();\n'
    assert single_statement('translate(v = [1.00, 0.00, 0.00])', 'cube();\n') == \
        'translate(v = [1.00, 0.00, 0.00])\n    cube();\n'
    assert block('union()', 'cube();\nsphere();\n') == \
        'union()\n{\n    cube();\n    sphere();\n}\n'
    nested = block('difference()', block('union()', 'cube();\n') + 'sphere();\n')
    assert nested == ('difference()\n{\n'
                      '    union()\n    {\n        cube();\n    }\n'
                      '    sphere();\n}\n')


def test_module_block():
    assert module_block('main', 'cube();\n') == 'module main()\n{\n    cube();\n}\n'
    assert module_block('main', '') == 'module main()\n{\n}\n'


def test_negative_zero_renders_unsigned():
    node = Cube(1).translate(Vector3(-1.0, -0.0, -0.001))
    assert node.render().startswith('translate(v = [-1.00, 0.00, 0.00])\n')


def _comma_localeconv(original):
    def localeconv():
        conv = dict(original())
        conv.update(decimal_point=',', thousands_sep='.', grouping=[3, 3, 0])
        return conv
    return localeconv


def test_render_ignores_locale(monkeypatch):
    node = Polygon([(0.5, 1.25), (2.75, 0)]).translate(1.5, 0.25, 0).union(Cube(0.5))
    expected = node.render()
    assert 'translate(v = [1.50, 0.25, 0.00])' in expected
    assert 'polygon([[0.5,1.25],[2.75,0]]);' in expected

    monkeypatch.setattr(locale, 'localeconv', _comma_localeconv(locale.localeconv))
    assert locale.localeconv()['decimal_point'] == ','
    assert node.render() == expected
    assert fmt2(1234.5) == '1234.50'
    assert fmtnum(1234.5) == '1234.5'

    # a real comma-decimal locale, where the host has one installed
    saved = locale.setlocale(locale.LC_NUMERIC)
    try:
        for name in ('de_DE.UTF-8', 'de_DE.utf8', 'fr_FR.UTF-8', 'fr_FR.utf8', 'de_DE'):
            try:
                locale.setlocale(locale.LC_NUMERIC, name)
            except locale.Error:
                continue
            assert node.render() == expected
            break
    finally:
        locale.setlocale(locale.LC_NUMERIC, saved)
