from setuptools import setup, find_packages

with open('README.md') as f:
    readme = f.read()

setup(
    name='stencil',
    version='0.1.0',
    description='Build html as an immutable tree of nodes and render it to a string',
    long_description=readme,
    long_description_content_type='text/markdown',
    python_requires='>=3.9',
    packages=find_packages(exclude=('tests', 'docs')),
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['stencil=stencil.__main__:main'],
    },
)
