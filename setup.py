"""
Provides project-level commands. Commands are run via `python setup.py <command> [args]`

Commands available:

- apidoc: regenerate reST docs for inline pydoc comments
- autobuild: watch for changes to the reST files and rebuild the documentation, refreshing
   the browser.
"""

from setuptools import setup, Command

import os


class RunInRootCommand(Command):
    user_options = []

    def initialize_options(self):
        self.cwd = None

    def finalize_options(self):
        self.cwd = os.getcwd()

    def run(self):
        assert os.getcwd() == self.cwd, 'Must be in package root: %s' % self.cwd
        self.runcmd()

    def runcmd(self):
        pass


class ApiDocCommand(RunInRootCommand):
    description = "regenerates the API docs"

    def runcmd(self):
        os.system('"sphinx-apidoc" -f -e -o docs/apidoc src/devd')


class AutoBuildCommand(RunInRootCommand):
    description = "watches the docs for changes and rebuilds them, automatically refreshing the browser page"

    def runcmd(self):
        os.system("sphinx-autobuild docs docs/_build/html -B")


setup(
    name='devd-connector-py',
    version='0.0.1',
    description='Reads device and kernel notifications from the FreeBSD devd socket and dispatches them to handlers.',
    url='',
    author='',
    author_email='',
    license='BSD',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=['devd', 'devd.conduit', 'devd.config', 'devd.connector',
              'devd.protocol', 'devd.support'],
    package_data={'devd.config': ['*.cfg']},
    install_requires=[
        'configobj>=5.0.9',
    ],
    extras_require={
        'test': [
            'PyHamcrest>=2.0',
            'pytest',
            'timeout-decorator',
        ],
    },
    entry_points={
        'console_scripts': [
            'devd-monitor = devd.monitor:main',
        ],
    },
    zip_safe=False,
    cmdclass={
        'apidoc': ApiDocCommand,
        'autobuild': AutoBuildCommand
    }
)
