from setuptools import setup
from pathlib import Path
import re


def read_src_version():
    p = (Path(__file__).parent / 'src' / 'sentinelconf' / '__init__.py')
    src = p.read_text()
    m = re.search(r"^__version__\s*=\s*'([^']+)'", src, re.M)
    return m.group(1)


requires = [
    'attrs>=19.3',
    'trafaret>=2.0',
    'typing_extensions>=3.7.4',
]
build_requires = [
    'wheel',
    'twine',
]
test_requires = [
    'pytest>=6.0',
    'pytest-cov',
    'pytest-mock',
    'flake8',
]
dev_requires = build_requires + test_requires + [
    'pytest-sugar',
]


setup(
    name='sentinelconf',

    # Versions should comply with PEP440.  For a discussion on single-sourcing
    # the version across setup.py and the project code, see
    # https://packaging.python.org/en/latest/single_source_version.html
    version=read_src_version(),
    description='Validated configuration objects for Redis Sentinel deployments',
    long_description=Path('README.rst').read_text(),
    license='LGPLv3',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Operating System :: POSIX',
        'Operating System :: MacOS :: MacOS X',
        'Topic :: Database',
        'Topic :: Software Development :: Libraries',
    ],
    package_dir={'': 'src'},
    packages=['sentinelconf'],
    python_requires='>=3.8',
    install_requires=requires,
    extras_require={
        'build': build_requires,
        'test': test_requires,
        'dev': dev_requires,
    },
)
