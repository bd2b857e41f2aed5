from utilbox.main import UtilBoxTest


def test_merge_nested_values():
    with UtilBoxTest() as app:
        app.config.merge(dict(price=dict(formats=dict(short=dict(location='before')))))
        app.config.merge(dict(price=dict(formats=dict(cents=dict(location='after')))))

        assert app.config.get('price', 'formats') == dict(
            short=dict(location='before'),
            cents=dict(location='after'),
        )


def test_merge_does_not_keep_references():
    formats = dict(short=dict(location='before'))
    with UtilBoxTest() as app:
        app.config.merge(dict(price=dict(formats=formats)))
        formats['short']['location'] = 'after'

        assert app.config.get('price', 'formats')['short']['location'] == 'before'


def test_merge_without_override():
    with UtilBoxTest() as app:
        app.config.merge(dict(price=dict(unit='$', extra='new')), override=False)

        assert app.config.get('price', 'unit') == ''
        assert app.config.get('price', 'extra') == 'new'


def test_merge_none_and_flat_values():
    with UtilBoxTest() as app:
        app.config.merge(None)
        app.config.merge(dict(flat='ignored', price=dict(unit='¥')))

        assert 'flat' not in app.config.get_sections()
        assert app.config.get('price', 'unit') == '¥'


def test_config_file_is_deep_merged(write_yaml):
    path = write_yaml('utilbox.yaml', dict(price=dict(unit='¥', formats=dict(short=dict(location='before')))))
    with UtilBoxTest(config_files=[path]) as app:
        app.config.merge(dict(price=dict(formats=dict(cents=dict(location='after')))))

        assert app.config.get('price', 'unit') == '¥'
        assert sorted(app.config.get('price', 'formats')) == ['cents', 'short']
