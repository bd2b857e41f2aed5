import os
import yaml
from cement import Controller, ex
from utilbox.core.exc import UtilBoxError
from utilbox.core.utils.dict import merge_all
from utilbox.core.utils.format import secrecy_mobile, unit_price
from utilbox.core.utils.regex import PATTERNS, is_valid
from utilbox.core.utils.url import url_parse


class UtilsController(Controller):

    class Meta:
        label = 'utils'
        stacked_type = 'embedded'
        stacked_on = 'base'

    @ex(
        help='deep merge yaml or json files, later files win',
        arguments=[
            (
                ['files'],
                dict(
                    nargs='+',
                    metavar='FILE',
                    help='yaml or json documents to merge in order',
                ),
            ),
            (
                ['-o', '--output'],
                dict(
                    action='store',
                    default=None,
                    help='write the merged yaml to this file instead of stdout',
                ),
            ),
        ],
    )
    def merge(self):
        docs = []
        for path in self.app.pargs.files:
            self.app.log.debug(f'Read merge input {path}')
            if not os.path.isfile(path):
                raise UtilBoxError(f'Merge input "{path}" does not exist')
            with open(path, 'r', encoding='utf-8') as f:
                try:
                    docs.append(yaml.safe_load(f))
                except yaml.YAMLError as e:
                    raise UtilBoxError(f'Merge input "{path}" is not valid yaml: {e}')

        merged = merge_all(docs)
        text = yaml.safe_dump(merged, sort_keys=False, allow_unicode=True, default_flow_style=False)

        if self.app.pargs.output:
            with open(self.app.pargs.output, 'w', encoding='utf-8') as f:
                f.write(text)
            self.app.log.info(f'Merged {len(docs)} files into {self.app.pargs.output}')
        else:
            self.app.print(text.rstrip('\n'))

    @ex(
        help='parse the query parameters of an url',
        arguments=[
            (['url'], dict(help='url or query string, e.g. "?id=12345&a=b"')),
        ],
    )
    def parse(self):
        params = url_parse(self.app.pargs.url)
        self.app.print('\n'.join(f'{key}={val}' for key, val in params.items()))

    @ex(
        help='mask the middle digits of a mobile number',
        arguments=[
            (['mobile'], dict(help='11 digit mobile number')),
        ],
    )
    def mask(self):
        self.app.print(secrecy_mobile(self.app.pargs.mobile))

    @ex(
        help='format an amount as price with currency unit',
        arguments=[
            (['value'], dict(help='amount to format')),
            (
                ['--unit'],
                dict(
                    action='store',
                    default=None,
                    help='currency unit, defaults to config price.unit',
                ),
            ),
            (
                ['--location'],
                dict(
                    action='store',
                    default=None,
                    choices=['before', 'after'],
                    help='only the integer part (before) or the decimals (after)',
                ),
            ),
        ],
    )
    def price(self):
        unit = self.app.pargs.unit
        if unit is None:
            unit = self.app.config.get('price', 'unit')
        location = self.app.pargs.location
        if location is None:
            location = self.app.config.get('price', 'location')
        try:
            self.app.print(unit_price(self.app.pargs.value, unit, location))
        except ValueError as e:
            raise UtilBoxError(str(e))

    @ex(
        help='validate a value against a named rule',
        arguments=[
            (['rule'], dict(help='rule name, see the patterns command')),
            (['value'], dict(help='value to validate')),
        ],
    )
    def validate(self):
        if is_valid(self.app.pargs.rule, self.app.pargs.value):
            self.app.print('valid')
        else:
            self.app.log.debug(f'"{self.app.pargs.value}" does not match rule {self.app.pargs.rule}')
            self.app.print('invalid')
            self.app.exit_code = 1

    @ex(help='list the validation rules and their patterns')
    def patterns(self):
        width = max(len(name) for name in PATTERNS)
        self.app.print('\n'.join(f'{name:{width}}  {pattern.pattern}' for name, pattern in PATTERNS.items()))
