from flask import Flask
from app.config import Config
from app.extensions import db, migrate


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # 1) Önce db init (db.engine / db.session için şart)
    db.init_app(app)

    # 2) Diğer extension'lar
    migrate.init_app(app, db)

    # modeller metadata'ya kayıt olsun
    from app.models.book import Book  # noqa: F401

    if app.config.get("CREATE_TABLES"):
        with app.app_context():
            db.create_all()

    return app
