from app.database import Base, engine
from app.models import category, post, post_request  # noqa: F401

print("Creating database tables...")
Base.metadata.create_all(bind=engine)
print("✅ All tables created successfully!")
