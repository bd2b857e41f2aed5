from cement import Controller
from cement.utils.version import get_version_banner as cement_version_banner
from utilbox.core.version import get_version as utilbox_get_version

DESCRIPTION = """UtilBox formats, masks, parses, validates and merges everyday values."""
CEMENT_VERSION, PYTHON_VERSION, OS_VERSION = (cement_version_banner().split('\n') + ['unknown', 'unknown', 'unknown'])[:3]
VERSION_BANNER = f"""
{DESCRIPTION}

UtilBox {utilbox_get_version()}
{CEMENT_VERSION}
{PYTHON_VERSION}
{OS_VERSION}
"""


class BaseController(Controller):

    class Meta:
        label = 'base'

        # hide the curly list of subcommands in usage
        subparser_options = dict(metavar='')

        # text displayed at the top of --help output
        description = DESCRIPTION

        # text displayed at the bottom of --help output
        epilog = 'Example: utilbox price 2999 --unit ¥'

        # controller level arguments. ex: 'utilbox --version'
        arguments = [
            (
                ['-v', '--version'],
                dict(
                    action='version',
                    version=VERSION_BANNER,
                ),
            ),
        ]

    def _default(self):
        self._parser.print_help()
