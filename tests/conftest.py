import pytest

from gearmesh import settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
	''' every test starts from the library defaults, whatever the user configuration holds '''
	monkeypatch.setitem(settings.generation, 'normalize_normals', False)
	monkeypatch.setitem(settings.generation, 'repeat_first_pitch', True)
