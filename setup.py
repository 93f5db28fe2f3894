from setuptools import setup, find_packages

setup(
    name='rn-component-schema',
    version='0.1.0',
    py_modules=['rnschema', 'builder'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pydantic>=2.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'rnschema = rnschema:main',
        ],
    },
)
