import os
import pytest
import yaml
from utilbox.core.exc import UtilBoxError
from utilbox.main import UtilBoxTest


def run_and_get_output(argv, **kwargs):
    with UtilBoxTest(argv=argv, **kwargs) as app:
        app.run()
        data, _ = app.last_rendered
        return data['out'], app.exit_code


def test_mask():
    out, exit_code = run_and_get_output(['mask', '13888888888'])
    assert out == '138****8888'
    assert exit_code == 0


def test_mask_unchanged():
    out, _ = run_and_get_output(['mask', '123'])
    assert out == '123'


def test_parse():
    out, _ = run_and_get_output(['parse', 'https://shop.example/item?id=12345&a=b'])
    assert out.splitlines() == ['id=12345', 'a=b']


def test_price():
    out, _ = run_and_get_output(['price', '2999', '--unit', '¥'])
    assert out == '¥2,999.00'


def test_price_location():
    out, _ = run_and_get_output(['price', '2999.5', '--location', 'after'])
    assert out == '50'


def test_price_unit_from_config(write_yaml):
    path = write_yaml('utilbox.yaml', dict(price=dict(unit='$')))
    out, _ = run_and_get_output(['price', '1234567'], config_files=[path])
    assert out == '$1,234,567.00'


def test_price_invalid():
    with UtilBoxTest(argv=['price', 'abc']) as app:
        with pytest.raises(UtilBoxError):
            app.run()


def test_validate():
    out, exit_code = run_and_get_output(['validate', 'mobile', '13888888888'])
    assert out == 'valid'
    assert exit_code == 0


def test_validate_invalid():
    out, exit_code = run_and_get_output(['validate', 'email', 'not-an-email'])
    assert out == 'invalid'
    assert exit_code == 1


def test_validate_unknown_rule():
    with UtilBoxTest(argv=['validate', 'zipcode', '12345']) as app:
        with pytest.raises(UtilBoxError):
            app.run()


def test_patterns():
    out, _ = run_and_get_output(['patterns'])
    names = [line.split()[0] for line in out.splitlines()]
    assert 'mobile' in names
    assert 'license_num' in names
    assert len(names) == 12


def test_merge(write_yaml):
    base = write_yaml('base.yaml', dict(db=dict(host='a', port=1), tags=['x']))
    local = write_yaml('local.yaml', dict(db=dict(host='b'), tags=['y']))
    out, _ = run_and_get_output(['merge', base, local])
    assert yaml.safe_load(out) == dict(db=dict(host='b', port=1), tags=['y'])


def test_merge_to_file(tmp, write_yaml):
    base = write_yaml('base.yaml', dict(service=dict(url='https://api.dev', retries=1)))
    local = write_yaml('local.yaml', dict(service=dict(retries=3)))
    target = os.path.join(tmp.dir, 'merged.yaml')
    with UtilBoxTest(argv=['merge', base, local, '-o', target]) as app:
        app.run()

    with open(target, 'r', encoding='utf-8') as f:
        assert yaml.safe_load(f) == dict(service=dict(url='https://api.dev', retries=3))


def test_merge_missing_file(tmp):
    with UtilBoxTest(argv=['merge', os.path.join(tmp.dir, 'missing.yaml')]) as app:
        with pytest.raises(UtilBoxError):
            app.run()


def test_price_large_amount():
    out, exit_code = run_and_get_output(['price', '1e30', '--unit', '¥'])
    assert out == '¥1' + ',000' * 10 + '.00'
    assert exit_code == 0
