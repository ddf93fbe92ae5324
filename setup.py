from setuptools import setup, find_packages

setup(name='offsetcenter',
      version='0.4',
      description='Offset a map center so a point sits in the visible part of a partially covered viewport',
      url='git@github.com:bigdata-sectra/offsetcenter.git',
      author='Big Data - MTT',
      author_email='bigdata@sectra.gob.cl',
      license='MIT',
      packages=find_packages(),
      install_requires = ['numpy', 'pandas'],
      extras_require = {'test': ['pytest']},
      zip_safe=False)
