"""
UtilBox YAML extension module.

Extends the Cement YamlConfigHandler so that nested dictionaries inside a
configuration section are deep merged instead of replaced when another
configuration file or `app.config.merge()` provides the same key.

### Example:

```python
# config/utilbox.yaml
price:
  unit: '¥'
  formats:
    short: { location: before }

# ~/.utilbox.yaml
price:
  formats:
    cents: { location: after }

app.config.get('price', 'formats')
# {'short': {'location': 'before'}, 'cents': {'location': 'after'}}
```

"""

from cement.ext.ext_yaml import YamlConfigHandler
from utilbox.core.utils.base import is_plain_object
from utilbox.core.utils.dict import deep_merge


class UtilBoxYamlConfigHandler(YamlConfigHandler):
    """
    YAML configuration handler with deep merge of nested section values.

    All other behaviour (`get`, `set`, `get_section_dict`, file parsing) is
    inherited from Cement's YamlConfigHandler.

    """

    class Meta:
        label = 'utilbox.yaml'

    def merge(self, dict_obj, override=True):
        """
        Merge a dictionary into the current configuration.

        ### Args:

        - **dict_obj** (dict): Sections of configuration keys/values to merge

        ### Keyword Args:

        - **override** (bool): Replace existing keys (deep merging nested
          dicts) if True, only add missing keys if False

        ### Raises:

        - **AssertionError**: If dict_obj is not None and not a dictionary

        ### Notes:

        : Only dict values at the top level are handled as sections, like
          Cement does. Values below `section.key` are merged with
          `deep_merge()`, so the stored dict never shares nested dicts with
          `dict_obj`.

        """
        if dict_obj is None:
            return

        assert is_plain_object(dict_obj), 'Dictionary object required.'

        for section, values in dict_obj.items():
            if not is_plain_object(values):
                continue

            if section not in self.get_sections():
                self.add_section(section)

            for key, value in values.items():
                exists = key in self.keys(section)
                if exists and not override:
                    continue
                if is_plain_object(value):
                    current = self.get(section, key) if exists else None
                    value = deep_merge(current, value) if is_plain_object(current) else deep_merge(value)
                self.set(section, key, value)


def load(app):
    """
    Register the UtilBoxYamlConfigHandler and make it the config handler.
    """
    app.handler.register(UtilBoxYamlConfigHandler)
    app._meta.config_handler = UtilBoxYamlConfigHandler.Meta.label
