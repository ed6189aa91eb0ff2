"""
Tests for the headless layout checker CLI.
"""
import json
import pytest

import headless


def run(argv):
    with pytest.raises(SystemExit) as exc_info:
        headless.main(argv)
    return exc_info.value.code


@pytest.fixture
def no_config(tmp_path):
    return ['-c', str(tmp_path / 'no_config.json')]


class TestHeadlessChecker:

    def test_all_fit(self, layout_file, no_config, capsys):
        assert run([layout_file] + no_config) == headless.EXIT_OK
        out = capsys.readouterr().out
        assert 'Table 1 [t1]: (160.00, 160.00) - (240.00, 240.00) ok' in out
        assert 'All tables fit' in out

    def test_out_of_bounds(self, out_of_bounds_file, no_config, capsys):
        assert run([out_of_bounds_file] + no_config) == headless.EXIT_OUT_OF_BOUNDS
        assert 'OUT OF BOUNDS' in capsys.readouterr().out

    def test_clamp_prints_fixed_layout(self, out_of_bounds_file, no_config, capsys):
        assert run([out_of_bounds_file, '--clamp'] + no_config) == headless.EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data['resources'][0]['center_x'] == pytest.approx(1150)
        assert data['resources'][0]['center_y'] == pytest.approx(400)

    def test_missing_file(self, tmp_path, no_config, capsys):
        assert run([str(tmp_path / 'nope.json')] + no_config) == headless.EXIT_INPUT_ERROR
        assert 'not found' in capsys.readouterr().out

    @pytest.mark.parametrize("content", [
        'not json', '[]', '{"resources": {}}', '{"resources": [{"center_x": 1}]}',
        '{"resources": [42]}', '{"resources": ["t1"]}',
    ])
    def test_invalid_layout(self, tmp_path, no_config, content):
        path = tmp_path / 'bad.json'
        path.write_text(content, encoding='utf-8')
        assert run([str(path)] + no_config) == headless.EXIT_INPUT_ERROR

    def test_invalid_config(self, layout_file, tmp_path):
        config = tmp_path / 'config.json'
        config.write_text('{"grid_size": -1}', encoding='utf-8')
        assert run([layout_file, '-c', str(config)]) == headless.EXIT_INPUT_ERROR

    def test_unreadable_layout(self, layout_file, no_config, monkeypatch, capsys):
        def deny(file_path, grid_size):
            raise PermissionError(13, 'Permission denied', file_path)

        monkeypatch.setattr(headless, '_load_layout', deny)
        assert run([layout_file] + no_config) == headless.EXIT_INPUT_ERROR
        assert 'Permission denied' in capsys.readouterr().out
