import pytest
from utilbox.main import UtilBoxTest, main


def test_utilbox():
    # test utilbox without any subcommands or arguments
    with UtilBoxTest() as app:
        app.run()
        assert app.exit_code == 0


def test_utilbox_debug():
    # test that debug mode is functional
    argv = ['--debug']
    with UtilBoxTest(argv=argv) as app:
        app.run()
        assert app.debug is True


def test_utilbox_config_defaults():
    with UtilBoxTest() as app:
        app.run()
        assert app.config.get('price', 'unit') == ''
        assert app.config.get('price', 'location') is None


def test_main_reports_utilbox_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['validate', 'zipcode', '12345'])
    assert exc.value.code == 1
    assert 'UtilBoxError > Unknown validation rule "zipcode"' in capsys.readouterr().out
