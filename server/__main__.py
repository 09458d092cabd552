import click
import uvicorn

from config.settings import app_settings

APPS = {
    'target': 'server.asgi:target_app',
    'client': 'server.asgi:client_app',
}


@click.command(help="Run the target or the client weather service")
@click.argument('service', type=click.Choice(sorted(APPS)))
@click.option('--host', default=app_settings.host, show_default=True)
@click.option('--port', type=int, default=app_settings.port, show_default=True)
def cli(service: str, host: str, port: int) -> None:
    uvicorn.run(APPS[service], host=host, port=port)


if __name__ == '__main__':
    cli()
