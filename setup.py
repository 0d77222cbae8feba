"""
Setup configuration for the OpenSDS fake API layer
"""

from setuptools import setup, find_packages
import os

# Read README
def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()

setup(
    name='opensds-fake',
    version='1.0.0',
    description='OpenSDS fake API layer - canned share and volume responses for API tests',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    author='OpenSDS',
    license='Apache License 2.0',

    packages=find_packages(exclude=['tests', 'tests.*']),

    install_requires=[
        'click>=8.1.3',
        'tabulate>=0.9.0',
        'python-json-logger>=3.1.0',
        'pydantic>=2.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'opensds-fake=opensds_fake.cli:main',
        ],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Software Development :: Testing :: Mocking',
        'Topic :: System :: Filesystems',
    ],

    python_requires='>=3.8',

    include_package_data=True,
    zip_safe=False,

    keywords='opensds fake mock shares volumes cinder manila testing',
)
