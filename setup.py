# Always prefer setuptools over distutils
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

with open(path.join(here, 'requirements.txt'), encoding='utf-8') as f:
    requirements = [
        line.strip() for line in f.readlines()
        if line.strip() and not line.startswith('#')
    ]

with open(path.join(here, 'requirements.dev.txt'), encoding='utf-8') as f:
    requirements_dev = [
        line.strip() for line in f.readlines()
        if line.strip() and not line.startswith('#')
    ]


setup(
    name='django-serializer-dispatch',
    version='1.0.0',
    description='Serializer resolution and dispatch for DRF JSON rendering',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Framework :: Django',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='django rest-framework serializers json camelcase',

    packages=find_packages(
        exclude=['tests', 'tests.*', 'test_*', 'test_*.*']),

    install_requires=requirements,
    python_requires='>=3.8',

    # List additional groups of dependencies here
    #   $ pip install django-serializer-dispatch[dev]
    extras_require={
        'dev': requirements_dev,
    },
)
