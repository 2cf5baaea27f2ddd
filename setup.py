from setuptools import setup, find_packages

setup(
    name='racket_motion',
    version='0.1.0',
    description='Real-time racket orientation from wireless motion devices over UDP',
    packages=find_packages(include=['racket_motion', 'racket_motion.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
