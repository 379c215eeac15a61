from setuptools import setup, find_packages

setup(
    name='zmx-compiler',
    version='0.1.0',
    py_modules=['zmx', 'compiler'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'zmx_core.runtime': ['*.js'],
    },
    python_requires='>=3.8',
    install_requires=[
        'lark>=1.1',
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'zmx = zmx:main',
        ],
    },
)
