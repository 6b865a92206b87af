import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from gallery import create_app

REGIONS = [
    {"name": "paris", "lat": 48.85, "long": 2.35},
    {"name": "oslo", "lat": 59.91, "long": 10.75},
]

PARIS_FILES = ["a.png", "b.txt", "c.jpg", "d.webp"]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE region (name TEXT, lat REAL, long REAL)"))
        conn.execute(text("INSERT INTO region VALUES (:name, :lat, :long)"), REGIONS)
    yield engine
    engine.dispose()


@pytest.fixture
def site(tmp_path):
    """Lay out images/, thumbs/ and index.html the way the server expects them."""
    images = tmp_path / "images"
    thumbs = tmp_path / "thumbs"
    (images / "paris").mkdir(parents=True)
    (thumbs / "paris").mkdir(parents=True)
    for name in PARIS_FILES:
        (images / "paris" / name).write_bytes(f"full {name}".encode())
    (thumbs / "paris" / "a.png").write_bytes(b"thumb a.png")

    # On disk but not in the store
    (images / "rome").mkdir()
    (images / "rome" / "colosseum.jpg").write_bytes(b"rome")
    (thumbs / "rome").mkdir()
    (thumbs / "rome" / "colosseum.jpg").write_bytes(b"rome")

    (tmp_path / "index.html").write_text("<html><title>Region Gallery</title></html>")
    return tmp_path


@pytest.fixture
def app(engine, site):
    app = create_app(
        config={
            "TESTING": True,
            "IMAGES_DIR": str(site / "images"),
            "THUMBS_DIR": str(site / "thumbs"),
            "SITE_INDEX": str(site / "index.html"),
        },
        engine=engine,
    )
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
