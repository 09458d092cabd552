from server.app import create_client_app, create_target_app

target_app = create_target_app()
client_app = create_client_app()
