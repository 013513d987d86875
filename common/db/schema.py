from sqlalchemy import JSON, Boolean, Column, Date, DateTime, MetaData, String, Table, Text, func

metadata = MetaData()

registrations = Table(
    "registrations",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
    Column("first_name", Text, nullable=False),
    Column("last_name", Text, nullable=False),
    Column("school_college_name", Text),
    Column("date_of_birth", Date),
    Column("city_state", Text),
    Column("gender", Text),
    Column("category", JSON, nullable=False),
    Column("other_category", Text),
    Column("participation_type", Text),
    Column("description", Text),
    Column("social", Text),
    Column("requirements", Text),
    Column("confirmation", Boolean, nullable=False),
    Column("profile_photo_reference", Text),
)
