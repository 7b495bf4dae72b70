import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from schools.utils import init_database, seed_sample_schools

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Create the schools table and load sample schools into an empty table'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-sample-data',
            action='store_true',
            help='Only create the table, do not insert sample schools',
        )

    def handle(self, *args, **options):
        db = settings.DATABASES['default']
        try:
            init_database(verbosity=max(options['verbosity'] - 1, 0))
        except DatabaseError as e:
            logger.exception("Database initialization failed")
            raise CommandError(
                f"Database initialization failed: {e}\n"
                f"Check the connection settings (engine {db['ENGINE']}, "
                f"host {db.get('HOST') or 'local'}, name {db['NAME']})."
            ) from e
        self.stdout.write("Table \"schools\" created or already exists")

        if options['no_sample_data']:
            return

        created = seed_sample_schools()
        if created:
            self.stdout.write(self.style.SUCCESS(f"Inserted {created} sample schools"))
        else:
            self.stdout.write("Table already contains data, skipping sample data insertion")
