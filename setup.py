import os

import setuptools


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()

setuptools.setup(
   name='volume-lockr',
   version='1.0.0',
   description='Lock audio stream volumes to a range and keep them there',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="volume lock android audio",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   install_requires=[
      'krozark-current-platform',
   ],
   extras_require={
      'android': ['pyjnius'],
      'test': ['pytest'],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: OS Independent",
    ],
   python_requires='>=3.10',
)
