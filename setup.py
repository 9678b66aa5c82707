#!/usr/bin/env python3
from setuptools import setup

setup(
    name='postag',
    version='1.0.0',
    license='GNU Affero GPL v3',
    author='Florian Leitner',
    author_email='florian.leitner@gmail.com',
    description='a statistical part-of-speech tagger with a disambiguation rule cascade',
    long_description=open('README.rst').read(),
    install_requires=[
        'nltk >= 3.0',
        'scikit-learn >= 0.24',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'postag',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/postrain.py',
        'scripts/postagger.py',
        'scripts/poseval.py',
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
    ],
)
