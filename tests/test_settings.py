import io

from gearmesh import settings


def test_getparam():
	assert settings.getparam([None, {'a': 1}, {'a': 2, 'b': 3}], 'a') == 1
	assert settings.getparam([{'a': 1}, {'b': 3}], 'b') == 3
	assert settings.getparam([{'a': 1}], 'c') is None

def test_dump_load(tmp_path, monkeypatch):
	monkeypatch.setitem(settings.generation, 'normalize_normals', True)
	file = str(tmp_path/'gearmesh.yaml')
	settings.dump(file)

	monkeypatch.setitem(settings.generation, 'normalize_normals', False)
	settings.load(file)
	assert settings.generation['normalize_normals'] is True

def test_load_only_known_keys(monkeypatch):
	monkeypatch.setitem(settings.generation, 'repeat_first_pitch', True)
	settings.load(io.StringIO('generation: {repeat_first_pitch: false, unknown: 3}\nother: 1\n'))
	assert settings.generation['repeat_first_pitch'] is False
	assert 'unknown' not in settings.generation
	assert 'other' not in settings.settings

def test_load_empty_file(monkeypatch):
	monkeypatch.setitem(settings.generation, 'repeat_first_pitch', True)
	settings.load(io.StringIO(''))
	assert settings.generation['repeat_first_pitch'] is True

def test_install(tmp_path, monkeypatch):
	config = str(tmp_path/'sub'/'gearmesh.yaml')
	monkeypatch.setattr(settings, 'config', config)
	settings.install()
	assert (tmp_path/'sub'/'gearmesh.yaml').exists()
	settings.clean()
	assert not (tmp_path/'sub'/'gearmesh.yaml').exists()

def test_generation_options(monkeypatch):
	assert settings.generation_options() == {'normalize': False, 'repeat_first_pitch': True}
	monkeypatch.setitem(settings.generation, 'normalize_normals', True)
	assert settings.generation_options() == {'normalize': True, 'repeat_first_pitch': True}
	assert settings.generation_options(normalize_normals=False, repeat_first_pitch=False) == {'normalize': False, 'repeat_first_pitch': False}
