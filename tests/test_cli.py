import io

import pytest

from darkroom import cli


def test_music_messages(capsys):
    played = cli.play_background_music()
    paused = cli.pause_background_music()
    muted = cli.mute_background_music()
    out = capsys.readouterr().out
    assert cli.MUSIC_TRACK in played
    assert played in out and paused in out and muted in out


def test_main_quits_immediately(capsys):
    assert cli.main(["--seed", "1", "--moves", "q"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(cli.TITLE)
    assert "Playing background music" in out
    assert "Moved from" not in out


def test_main_space_and_m_control_music(capsys):
    cli.main(["--seed", "2", "--moves", " m"])
    out = capsys.readouterr().out
    assert "Background music paused (space)" in out
    assert "Background music muted (M)" in out


def test_main_default_world_starves_on_second_step(capsys):
    cli.main(["--seed", "3", "--moves", "ddd"])
    out = capsys.readouterr().out
    assert "Starvation sets in" in out
    assert out.count("Player died!") == 1
    assert out.count("Moved from") == 2


def test_main_reads_keys_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\nd\nq\n"))
    cli.main(["--seed", "4"])
    out = capsys.readouterr().out
    assert out.count("Moved from village") == 1


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit):
        cli.main(["--seed", "abc", "--moves", "q"])