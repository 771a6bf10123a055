"""Tests for the command line interface."""

import json

import click
import pandas as pd
import pytest
from click.testing import CliRunner

from proxroute.cli.main import main
from proxroute.cli.paths import resolve_origin
from proxroute.core.vertex import create_vertex


@pytest.fixture
def runner():
    return CliRunner()


class TestPathsCommand:
    """Test the paths command."""
    
    def test_stdin_to_stdout(self, runner, sample_text):
        """Results for the reachable vertices, origin and D omitted."""
        result = runner.invoke(main, ['paths'], input=sample_text)
        
        assert result.exit_code == 0
        assert result.output == 'B:1.0\nC:4.0\n'
    
    def test_input_file(self, runner, sample_text_file):
        result = runner.invoke(main, ['paths', str(sample_text_file)])
        
        assert result.exit_code == 0
        assert result.output.splitlines() == ['B:1.0', 'C:4.0']
    
    def test_single_vertex(self, runner):
        result = runner.invoke(main, ['paths'], input='solo,1,2,3\n')
        
        assert result.exit_code == 0
        assert result.output == ''
    
    def test_empty_input(self, runner):
        result = runner.invoke(main, ['paths'], input='')
        
        assert result.exit_code == 1
        assert 'No vertices in input' in result.output
    
    def test_malformed_input(self, runner):
        result = runner.invoke(main, ['paths'], input='A,0,0,0\nB,x,0,0\n')
        
        assert result.exit_code == 1
        assert 'Invalid record 2' in result.output
    
    def test_threshold_option(self, runner, sample_text):
        """With a radius of 4, C is reached directly from A."""
        result = runner.invoke(main, ['paths', '--threshold', '4'], input=sample_text)
        
        assert result.exit_code == 0
        assert result.output == 'B:1.0\nC:4.0\n'
    
    def test_origin_by_name(self, runner, sample_text):
        result = runner.invoke(main, ['paths', '--origin', 'C'], input=sample_text)
        
        assert result.exit_code == 0
        assert result.output == 'B:3.0\nA:4.0\n'
    
    def test_origin_by_index(self, runner, sample_text):
        result = runner.invoke(main, ['paths', '--origin', '3'], input=sample_text)
        
        assert result.exit_code == 0
        assert result.output == ''
    
    def test_origin_with_numeric_name(self, runner):
        """A vertex named 7 is chosen by name even though it is not index 7."""
        result = runner.invoke(main, ['paths', '--origin', '7'], input='A,0,0,0\n7,1,0,0\n')

        assert result.exit_code == 0
        assert result.output == 'A:1.0\n'

    def test_unknown_origin(self, runner, sample_text):
        result = runner.invoke(main, ['paths', '--origin', 'Z'], input=sample_text)
        
        assert result.exit_code == 1
        assert "No vertex named 'Z'" in result.output
    
    def test_origin_index_out_of_range(self, runner, sample_text):
        result = runner.invoke(main, ['paths', '--origin', '9'], input=sample_text)
        
        assert result.exit_code == 1
        assert 'out of range' in result.output
    
    def test_tsv_output_file(self, runner, sample_text, temp_dir):
        output = temp_dir / 'out.tsv'
        result = runner.invoke(
            main, ['paths', '--format', 'tsv', '-o', str(output)], input=sample_text)
        
        assert result.exit_code == 0
        df = pd.read_csv(output, sep='\t')
        assert df['name'].tolist() == ['B', 'C']
        assert df['distance'].tolist() == [1.0, 4.0]
    
    def test_tsv_input(self, runner, sample_tsv_file):
        result = runner.invoke(main, ['paths', '--input-format', 'tsv', str(sample_tsv_file)])
        
        assert result.exit_code == 0
        assert result.output == 'B:1.0\nC:4.0\n'
    
    def test_config_file(self, runner, sample_text, temp_dir):
        config_path = temp_dir / 'search.json'
        config_path.write_text(json.dumps({'origin': 'C', 'output_format': 'tsv'}),
                               encoding='utf-8')
        result = runner.invoke(main, ['paths', '-c', str(config_path)], input=sample_text)
        
        assert result.exit_code == 0
        assert result.output.splitlines() == ['name\tdistance', 'B\t3.0', 'A\t4.0']
    
    def test_option_overrides_config(self, runner, sample_text, temp_dir):
        config_path = temp_dir / 'search.json'
        config_path.write_text(json.dumps({'origin': 'C'}), encoding='utf-8')
        result = runner.invoke(
            main, ['paths', '-c', str(config_path), '--origin', 'A'], input=sample_text)
        
        assert result.exit_code == 0
        assert result.output == 'B:1.0\nC:4.0\n'
    
    def test_invalid_config(self, runner, sample_text, temp_dir):
        config_path = temp_dir / 'search.json'
        config_path.write_text(json.dumps({'threshold': -1}), encoding='utf-8')
        result = runner.invoke(main, ['paths', '-c', str(config_path)], input=sample_text)
        
        assert result.exit_code == 1
        assert 'Invalid configuration' in result.output
    
    def test_summary(self, runner, sample_text):
        result = runner.invoke(main, ['paths', '--summary'], input=sample_text)
        
        assert result.exit_code == 0
        assert 'B:1.0' in result.output
        assert 'Reachable: 2' in result.output
        assert 'Unreachable: 1' in result.output


class TestResolveOrigin:
    """Test --origin interpretation."""
    
    @pytest.fixture
    def numbered_vertices(self):
        return [
            create_vertex('A', 0, 0, 0),
            create_vertex('7', 1, 0, 0),
            create_vertex('0', 2, 0, 0),
        ]
    
    def test_name_match(self, numbered_vertices):
        assert resolve_origin(numbered_vertices, 'A') == 0
    
    def test_numeric_name_wins_over_index(self, numbered_vertices):
        """'0' names the third vertex, so it is not read as index 0."""
        assert resolve_origin(numbered_vertices, '7') == 1
        assert resolve_origin(numbered_vertices, '0') == 2
    
    def test_digits_without_name_are_an_index(self, numbered_vertices):
        assert resolve_origin(numbered_vertices, '1') == 1
    
    def test_integer_is_an_index(self, numbered_vertices):
        assert resolve_origin(numbered_vertices, 2) == 2
    
    def test_unknown_name(self, numbered_vertices):
        with pytest.raises(click.ClickException, match="No vertex named 'B'"):
            resolve_origin(numbered_vertices, 'B')
    
    def test_negative_looking_name_is_not_an_index(self, numbered_vertices):
        with pytest.raises(click.ClickException, match="No vertex named '-1'"):
            resolve_origin(numbered_vertices, '-1')
    
    def test_out_of_range(self, numbered_vertices):
        with pytest.raises(click.ClickException, match="out of range for 3 vertices"):
            resolve_origin(numbered_vertices, '9')


class TestMainGroup:
    """Test top-level commands."""
    
    def test_version_command(self, runner):
        result = runner.invoke(main, ['version'])
        
        assert result.exit_code == 0
        assert 'proxroute version 0.1.0' in result.output
        assert 'default threshold 3.0' in result.output
    
    def test_help(self, runner):
        result = runner.invoke(main, ['--help'])
        
        assert result.exit_code == 0
        assert 'paths' in result.output
    
    def test_short_help_option(self, runner):
        result = runner.invoke(main, ['-h'])
        
        assert result.exit_code == 0
        assert 'name,x,y,z' in result.output
