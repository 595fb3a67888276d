# -*- coding: utf-8 -*-
import codecs
from setuptools import setup, find_packages


tests_require = [
    'pytest>=7.0',
]

setup(
    name='Potion-JSONAPI',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    url='https://jsonapi.org/format/1.0/',
    license='MIT',
    author='Lars Schöning',
    author_email='lars@lyschoening.de',
    description='Client for traversing JSON:API resources through their relationships and links',
    long_description=codecs.open('README.rst', encoding='utf-8').read(),
    python_requires='>=3.8',
    tests_require=tests_require,
    install_requires=[
        'jsonschema>=2.4.0',
        'rfc3987',
        'Werkzeug>=1.0',
        'blinker>=1.3',
        'requests>=2.0',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'docs': ['sphinx'],
        'tests': tests_require,
    }
)
