# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

long_description = "Stateful RSI / RSX grid signal engine built on the pandas-ta stateful indicator pattern"

setup(
    name = "pandas_ta_grid",
    packages = find_packages(exclude=["tests", "tests.*", "scripts"]),
    version = "0.1.0",
    description=long_description,
    long_description=long_description,
    url = "https://github.com/glar1900/pandas-ta-stateful",
    maintainer="Han Sang Woo",
    maintainer_email="hsangwoo5@naver.com",
    keywords = ['technical analysis', 'python3', 'pandas', 'rsi', 'rsx', 'grid trading'],
    license="The MIT License (MIT)",
    classifiers = [
        'Programming Language :: Python :: 3.8',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: Financial and Insurance Industry',
        'Topic :: Office/Business :: Financial :: Investment',
    ],
    python_requires=">=3.8",
    install_requires=['pandas', 'numpy', 'numba', 'loguru'],

    # List additional groups of dependencies here (e.g. development dependencies).
    # You can install these using the following syntax, for example:
    # $ pip install -e .[dev,test]
    extras_require = {
        'dev': ['pytest', 'jupyterlab'],
        'test': ['pytest'],
    },
)
