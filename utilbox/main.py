"""
UtilBox main module providing the command line application.

The helpers in `utilbox.core.utils` are plain functions and do not need the
application. The `utilbox` command makes the formatters, the query parser,
the validation rules and the deep merge usable from the shell.

"""

import os
from cement import App, TestApp
from cement.core.exc import CaughtSignal
from cement.utils import fs
from .config import config_defaults
from .core.exc import UtilBoxError
from .controllers.base import BaseController
from .controllers.utils import UtilsController


class UtilBox(App):
    """
    The UtilBox CLI application core class.

    ### Notes:

    - Configuration is read from `.yaml` files and deep merged by the
      `utilbox.ext.yaml` handler
    - Log output is colored by the `colorlog` extension
    - Output is written by `app.print()` from Cement's `print` extension

    """

    class Meta:
        # this app name
        label = 'utilbox'

        # this app main path
        main_dir = os.path.dirname(fs.abspath(__file__))

        # configuration defaults
        config_defaults = config_defaults()

        # call sys.exit() on close
        exit_on_close = True

        # load additional framework extensions
        extensions = [
            'colorlog',
            'print',
            'utilbox.ext.yaml',
        ]

        # register handlers
        handlers = [
            BaseController,
            UtilsController,
        ]

        # configuration file suffix
        config_file_suffix = '.yaml'

        # set the log handler
        log_handler = 'colorlog'


class UtilBoxTest(TestApp, UtilBox):
    """
    A subclass of UtilBox for tests.

    ```python
    from utilbox.main import UtilBoxTest

    with UtilBoxTest(argv=['mask', '13888888888']) as app:
        app.run()
        data, output = app.last_rendered
    ```

    """

    class Meta:
        # this app test name
        label = f'{UtilBox.Meta.label}_test'

        # load additional framework extensions
        extensions = [
            'print',
            'utilbox.ext.yaml',
        ]

        # set the log handler
        log_handler = 'logging'


def main(argv=None):
    """
    Main entry point for the utilbox command.

    ### Args:

    - **argv** (list, optional): Arguments to run with, defaults to sys.argv

    ### Returns:

    - **int**: The exit code, 1 after a `UtilBoxError` or `AssertionError`

    """
    with UtilBox(argv=argv) as app:
        try:
            app.run()

        except (AssertionError, UtilBoxError) as e:
            print(f'{type(e).__name__} > {e}')
            app.exit_code = 1
            if app.debug is True:
                import traceback

                traceback.print_exc()

        except CaughtSignal as e:
            # SIGINT and SIGTERM end the command without an error
            print({2: '\nstopped by Ctrl-C', 15: '\nterminated by SIGTERM'}.get(e.signum, f'\n{e}'))
            app.exit_code = 0

        return app.exit_code


if __name__ == '__main__':
    main()
