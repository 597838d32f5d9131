from setuptools import setup, find_packages

setup(
    name='weighted-multigraph',
    version='1.0.0',
    description='In-memory directed weighted multigraph with traversal, cycle detection and shortest paths',
    packages=find_packages(include=['multigraph', 'multigraph.*']),
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    python_requires='>=3.10',
)
