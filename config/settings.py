from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSetting(BaseSettings):
    log_level: str = 'INFO'
    enable_file_logging: bool = False
    log_file_path: str = 'app.log'
    target_api_prefix: str = '/api'
    client_api_prefix: str = ''
    host: str = '0.0.0.0'
    port: int = 80

    model_config = SettingsConfigDict(env_prefix='APP_')


class ClientSetting(BaseSettings):
    api_service_base_address: str = Field(
        default='', validation_alias='ApiServiceBaseAddress'
    )

    model_config = SettingsConfigDict(case_sensitive=False)


app_settings = AppSetting()
