#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'delnone']
test_requires = ['tox', 'pytest', 'tabulate']

setup(
    name='folds',
    version='0.1.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['folds'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {
      'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'folds = folds.ui:ui_main',
        ],
    },
    url='http://github.com/andrewguy9/folds',
    license='MIT',
    description='left fold and the reducers built on it.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
