from setuptools import setup, find_packages
# define VERSION
try:
    # when running build
    # use from utilbox package
    from utilbox.core.version import get_version

    VERSION = get_version()
except Exception:
    # when cement is not yet installed
    # just use this
    VERSION = '0.0.0-dev.0'

# read description from file
with open('README.md', 'r', encoding='utf-8') as f:
    LONG_DESCRIPTION = f.read()

# run setup
setup(
    name='utilbox',
    version=VERSION,
    description='Helpers to check, traverse, merge, validate, parse and format everyday values.',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license='MIT',
    python_requires='>=3.8',
    packages=find_packages(exclude=['ez_setup', 'tests*']),
    include_package_data=True,
    install_requires=[
        'cement>=3.0.10',
        'colorlog',
        'pyyaml',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    entry_points="""
        [console_scripts]
        utilbox = utilbox.main:main
    """,
)
