# apps/immune/management/commands/immune.py
"""
Management command for the immune response console
"""
import sys

from django.core.management.base import BaseCommand, CommandError

from apps.domain.models import Antigen, DomainException, InvalidAntigenError
from apps.immune.console import ConsoleSession
from apps.infrastructure.config import get_config
from apps.infrastructure.container import create_immune_service


class Command(BaseCommand):
    help = "Respond to antigens interactively, or once for each given value"

    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument(
            'values',
            nargs='*',
            type=int,
            help='Antigen values to respond to (omit for interactive mode)'
        )
        parser.add_argument(
            '--max-value',
            type=int,
            dest='max_value',
            help='Exclusive upper bound for antigen values'
        )
        parser.add_argument(
            '--seed',
            type=int,
            help='Seed for the random source'
        )

    def handle(self, *args, **options):
        service = self.build_service(options)

        if options['values']:
            self.respond_once(service, options['values'])
            return

        # The session writes its own line endings
        self.stdout.ending = ""
        session = ConsoleSession(
            service,
            stdin=options.get('stdin') or sys.stdin,
            stdout=self.stdout
        )
        session.run()

    def build_service(self, options):
        """Wire a service from environment config plus command-line overrides"""
        try:
            config = get_config()
        except ValueError as e:
            raise CommandError(f"Invalid configuration: {e}")

        if options.get('max_value') is not None:
            config['antigen']['max_value'] = options['max_value']
        if options.get('seed') is not None:
            config['random']['seed'] = options['seed']

        try:
            return create_immune_service(config)
        except DomainException as e:
            raise CommandError(str(e))

    def respond_once(self, service, values):
        """Respond to each value in order, reporting invalid ones"""
        for value in values:
            try:
                antibody = service.respond(Antigen(value))
            except InvalidAntigenError as e:
                self.stderr.write(self.style.ERROR(str(e)))
                continue

            self.stdout.write(str(antibody))
