def config_defaults():
    # application configuration defaults
    return dict(
        utilbox=dict(
            debug=False,
        ),
        price=dict(
            unit='',
            location=None,
        ),
    )
