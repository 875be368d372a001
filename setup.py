#!/usr/bin/env python
import sys

from setuptools import setup, Command

VERSION = '0.1'
DESCRIPTION = "Bracketed query string parsing into nested dicts and lists, with Django support."


class TestCommand(Command):
    pytest_args = ['tests']
    user_options = []

    # If we run test just pass all arguments over to pytest
    if len(sys.argv) > 2 and sys.argv[1] == 'test':
        pytest_args = sys.argv[2:]
        sys.argv = sys.argv[:2]

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import pytest
        raise SystemExit(pytest.main(self.pytest_args))


def run_setup():
    cmdclass = dict(test=TestCommand)
    kw = dict(cmdclass=cmdclass)

    setup(
            name="querybox",
            version=VERSION,
            description=DESCRIPTION,
            long_description=DESCRIPTION,
            classifiers=[
                "Operating System :: OS Independent",
                "Development Status :: 2 - Pre-Alpha",
                "Environment :: Web Environment",
                "Framework :: Django",
                "Intended Audience :: Developers",
                "License :: OSI Approved :: MIT License",
                "Programming Language :: Python :: 3",
                "Topic :: Software Development :: Libraries :: Python Modules",
            ],
            author="Kirill Fuchs",
            author_email="kfuchs@fuzzproductions.com",
            license="MIT License",
            packages=['querybox', 'querybox.django'],
            install_requires=['Django'],
            extras_require={'test': ['pytest']},
            platforms=['any'],
            **kw)


run_setup()
