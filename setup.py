from setuptools import setup

setup(
  name='idtrees',
  version='0.1.0',
  description='ID3 decision trees over categorical and numeric attributes',
  packages=['idtrees'],
  python_requires='>=3.8',
  install_requires=['numpy'],
  extras_require={'test': ['pytest']},
)
