from flask import Flask
from .config import load_settings
from .db import init_engine
from .routes import main_bp, api_bp
from .services.region_service import RegionService
from .services.image_service import ImageService

def create_app(config=None, engine=None):
    app = Flask(__name__, static_folder=None)
    app.config.update(load_settings())
    if config:
        app.config.update(config)

    # Region store is opened once and shared by every request
    if engine is None:
        engine = init_engine(app.config['DATABASE_URL'])

    app.extensions['region_gallery'] = {
        'regions': RegionService(engine, app.config['REGION_TABLE']),
        'images': ImageService(app.config['IMAGES_DIR'], app.config['THUMBS_DIR']),
    }

    # Register Blueprints
    app.register_blueprint(api_bp)
    app.register_blueprint(main_bp)

    return app
