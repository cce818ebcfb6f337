"""SQLite-backed profile repository."""

from dataclasses import dataclass

from sqlalchemy import select, update

from fitness_tracker.adapters.sqlite_database import SqliteDatabase, user_profile_table
from fitness_tracker.domain.profile import PROFILE_ID, Profile
from fitness_tracker.services.profile import ProfileRepository


@dataclass
class SqliteProfileRepository(ProfileRepository):
    """SQLite implementation for the singleton profile."""

    database: SqliteDatabase

    def get_profile(self) -> Profile | None:
        """Return the profile row, if present."""
        query = select(
            user_profile_table.c.name,
            user_profile_table.c.weight,
            user_profile_table.c.height,
            user_profile_table.c.goal,
        ).where(user_profile_table.c.id == PROFILE_ID)
        with self.database.connect() as connection:
            row = connection.execute(query).first()
        if row is None:
            return None
        return Profile(
            name=row.name, weight=row.weight, height=row.height, goal=row.goal
        )

    def update_profile(self, profile: Profile) -> bool:
        """Overwrite all profile fields."""
        statement = (
            update(user_profile_table)
            .where(user_profile_table.c.id == PROFILE_ID)
            .values(
                name=profile.name,
                weight=profile.weight,
                height=profile.height,
                goal=profile.goal,
            )
        )
        with self.database.transaction() as connection:
            result = connection.execute(statement)
            updated = result.rowcount > 0
        return updated
