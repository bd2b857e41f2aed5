import os
import shutil
import pytest
import yaml
from cement.utils import fs


@pytest.fixture(scope="function")
def tmp(request):
    t = fs.Tmp()
    yield t

    # cleanup
    if os.path.exists(t.dir) and t.cleanup is True:
        shutil.rmtree(t.dir)


@pytest.fixture(scope="function")
def write_yaml(tmp):
    # write a document into the tmp dir and return its path
    def _write_yaml(name, payload):
        path = os.path.join(tmp.dir, name)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(payload, f, sort_keys=False, allow_unicode=True)
        return path

    return _write_yaml
