import json
import logging
import os
import sys

import pytest

# Add project root to path to resolve imports
sys.path.append(os.path.join(os.path.dirname(os.path.dirname(__file__))))

from lotto_fallback.config.game_config import USER_ERROR_MESSAGE
from lotto_fallback.scripts.main import main, parse_args, parse_number_list


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() replaces the root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def run(tmp_path, *args):
    return main(['--log-dir', str(tmp_path / 'logs'), *args])


def test_parse_number_list():
    assert parse_number_list("7, 11,22") == [7, 11, 22]
    assert parse_number_list("") == []
    assert parse_number_list(None) == []
    with pytest.raises(ValueError, match="'x' is not an integer"):
        parse_number_list("7,x")


def test_parse_args_defaults():
    args = parse_args([])
    assert args.game == 'Custom Game'
    assert args.entries == 1
    assert args.lucky == ''
    assert args.system is None


def test_history_options_are_exclusive(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(['--history', str(tmp_path / 'x.txt'), '--demo-history'])
    assert exc_info.value.code == 1


def test_list_games(tmp_path, capsys):
    assert run(tmp_path, '--list-games') == 0
    out = capsys.readouterr().out
    assert 'USA Power Lotto: Pick 5 (1-69) + PB (1-26)' in out


def test_generate_from_history(tmp_path, capsys):
    history = tmp_path / 'draws.txt'
    history.write_text("Draw: 1, 7, 13, 21, 30, 44\nDraw: 7, 9, 13, 21, 33, 40\n")

    code = run(tmp_path, '--history', str(history), '--entries', '3',
               '--lucky', '7', '--unwanted', '13', '--seed', '11',
               '--output-dir', str(tmp_path / 'out'), '--plot', '--show-frequency')
    assert code == 0

    out = capsys.readouterr().out
    assert 'CUSTOM GAME - Standard' in out
    assert 'Offline fallback' in out
    assert 'cosmetic' in out

    json_files = list((tmp_path / 'out').glob('predictions_*.json'))
    assert len(json_files) == 1
    data = json.loads(json_files[0].read_text())
    entries = data['prediction']['entries']
    assert len(entries) == 3
    assert all(7 in e and 13 not in e for e in entries)
    assert (tmp_path / 'out' / 'frequency.png').exists()
    assert (tmp_path / 'logs' / 'lottery.log').exists()


def test_system_play_with_demo_history(tmp_path, capsys):
    code = run(tmp_path, '--game', 'UK Lotto', '--demo-history', '--system', '8', '--seed', '3')
    assert code == 0
    out = capsys.readouterr().out
    assert 'UK LOTTO - System 8' in out
    first = [line for line in out.splitlines() if line.startswith('1. ')][0]
    main_part = first[3:].split(' + ')[0]
    assert len(main_part.split(', ')) == 8


def test_insufficient_pool_message(tmp_path, capsys):
    code = run(tmp_path, '--main-count', '3', '--main-range', '5', '--unwanted', '1,2,3,4,5')
    assert code == 2
    assert USER_ERROR_MESSAGE in capsys.readouterr().out


def test_invalid_rules(tmp_path, capsys):
    assert run(tmp_path, '--entries', '0') == 1
    assert 'entry_count' in capsys.readouterr().out


def test_missing_history_file(tmp_path, capsys):
    assert run(tmp_path, '--history', str(tmp_path / 'nope.txt')) == 1
    assert 'not found' in capsys.readouterr().out


@pytest.mark.parametrize('option', ['--lucky', '--unwanted'])
def test_malformed_number_list_is_invalid_input(tmp_path, capsys, option):
    assert run(tmp_path, option, '7,x') == 1
    assert "'x' is not an integer" in capsys.readouterr().out


def test_usage_error_exits_with_invalid_input_code(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        run(tmp_path, '--entries', 'three')
    assert exc_info.value.code == 1


def test_history_with_undecodable_bytes(tmp_path, capsys):
    history = tmp_path / 'draws.txt'
    history.write_bytes(b"Draw: 1, 7, \xff\xfe 13\n")
    assert run(tmp_path, '--history', str(history), '--seed', '1') == 0
    assert 'Offline fallback' in capsys.readouterr().out


def test_history_path_is_directory(tmp_path, capsys):
    assert run(tmp_path, '--history', str(tmp_path)) == 1
    assert 'Error:' in capsys.readouterr().out


def test_plot_without_output_dir_warns(tmp_path):
    assert run(tmp_path, '--plot', '--seed', '1') == 0
    log_text = (tmp_path / 'logs' / 'lottery.log').read_text()
    assert '--plot ignored' in log_text
    assert not list(tmp_path.glob('**/frequency.png'))
