# -*- coding: utf-8 -*-
from setuptools import setup
from setuptools import find_packages

with open('README.md', encoding='utf-8') as file:
    long_description = file.read()

setup(
    name='urara',
    # keep in step with urara.__version__
    version='0.1',
    description='Lazy numeric ranges with a pluggable step and an explicit direction.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',

    packages=find_packages(exclude=['tests']),
    install_requires=['humanize'],
    include_package_data=True,
    zip_safe=False,
    test_suite='tests',
    extras_require={
        'testing': ['pytest', 'pytest-xdist'],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Development Status :: 2 - Pre-Alpha',
        'Topic :: Software Development :: Libraries',
    ],
)
