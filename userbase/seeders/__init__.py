from userbase.seeders.database_seeder import DatabaseSeeder
from userbase.seeders.users_seeder import UsersSeeder

__all__ = ["DatabaseSeeder", "UsersSeeder"]
