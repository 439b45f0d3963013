from jobly.db.base import create_tables
from jobly.db.session import engine

print("Creating tables...")
create_tables(engine)
print("Tables created successfully!")
