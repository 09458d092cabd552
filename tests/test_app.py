import logging
from unittest.mock import patch

from fastapi import APIRouter
from fastapi.testclient import TestClient

from config.settings import AppSetting
from server.app import (
    AppBuilder,
    build_logging_config,
    create_client_app,
    create_target_app,
    logging_config,
)


def test_set_api_prefix():
    builder = AppBuilder()
    builder.set_api_prefix('/api/test')
    assert builder._api_prefix == '/api/test'


def test_enable_file_logging():
    builder = AppBuilder()
    builder.enable_file_logging('test.log', 'INFO')
    assert builder._log_to_file is True
    assert builder._log_file_path == 'test.log'
    assert builder._file_log_level == 'INFO'


def test_add_router_uses_prefix():
    router = APIRouter()

    @router.get('/ping')
    async def ping() -> dict:
        return {'pong': True}

    builder = AppBuilder().set_api_prefix('/v2').add_router(router, ['Ping'])
    app = builder.build()

    client = TestClient(app)
    assert client.get('/v2/ping').json() == {'pong': True}
    assert client.get('/ping').status_code == 404


def test_file_logging_does_not_mutate_shared_config(tmp_path):
    log_file = tmp_path / 'service.log'
    builder = AppBuilder().enable_file_logging(str(log_file), 'WARNING')

    with patch('logging.config.dictConfig') as dict_config:
        config = builder._configure_file_logging()

    dict_config.assert_called_once_with(config)
    assert config['handlers']['file']['filename'] == str(log_file)
    assert config['root']['handlers'] == ['console', 'file']
    assert 'file' not in logging_config['handlers']
    assert logging_config['root']['handlers'] == ['console']


def test_build_logging_config_level():
    config = build_logging_config('DEBUG')
    assert config['root']['level'] == 'DEBUG'
    assert config['handlers']['console']['level'] == 'DEBUG'
    assert config['disable_existing_loggers'] is False


def test_target_and_client_routes(monkeypatch):
    monkeypatch.delenv('ApiServiceBaseAddress', raising=False)
    target = TestClient(create_target_app())
    relay = TestClient(create_client_app())

    response = target.get('/api/weatherforecast/weather')
    assert response.status_code == 200
    assert len(response.json()) == 5
    assert target.get('/weatherforecast').status_code == 404

    response = relay.get('/weatherforecast')
    assert response.status_code == 200
    assert response.json() == []
    assert relay.get('/api/weatherforecast/weather').status_code == 404


def test_create_app_with_file_logging(tmp_path):
    settings = AppSetting(
        enable_file_logging=True,
        log_file_path=str(tmp_path / 'client.log'),
        log_level='INFO',
    )
    with patch('server.app.app_settings', settings), patch(
        'logging.config.dictConfig'
    ) as dict_config:
        create_client_app()

    file_configs = [
        call.args[0]
        for call in dict_config.call_args_list
        if 'file' in call.args[0]['handlers']
    ]
    assert len(file_configs) == 1
    assert file_configs[0]['handlers']['file']['level'] == 'INFO'


def test_app_settings_env(monkeypatch):
    monkeypatch.setenv('APP_LOG_LEVEL', 'ERROR')
    monkeypatch.setenv('APP_TARGET_API_PREFIX', '/internal')

    settings = AppSetting()

    assert settings.log_level == 'ERROR'
    assert settings.target_api_prefix == '/internal'
    assert settings.client_api_prefix == ''
    assert logging.getLevelName(settings.log_level) == logging.ERROR
