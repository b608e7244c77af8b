import os
import re

from setuptools import find_packages, setup


def get_version():
    with open(os.path.join('fibheap', 'version.py')) as f:
        return re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]",
                         f.read()).group(1)


setup(name='fibheap',
      version=get_version(),
      description='Fibonacci heap priority queue',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.9',
      install_requires=['numpy', 'treelib'],
      extras_require={'test': ['pytest']})
