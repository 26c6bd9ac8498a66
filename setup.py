#!/usr/bin/env python

from setuptools import setup

setup(
    name="esmapping",
    version="0.1.0",
    description="Generate Elasticsearch mappings from python record types",
    author="Wouter van Atteveldt",
    author_email="wouter@vanatteveldt.com",
    packages=["esmapping"],
    include_package_data=True,
    zip_safe=False,
    keywords=["elasticsearch", "mapping", "pydantic"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Database",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "class-doc",
        "typing_extensions",
    ],
    extras_require={
        'dev': [
            'pytest',
            'mypy',
            'flake8',
        ]
    },
    entry_points={
        'console_scripts': [
            'esmapping = esmapping.__main__:main'
        ]
    },
)
