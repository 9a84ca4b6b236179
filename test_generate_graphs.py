import matplotlib

matplotlib.use('Agg')

from generate_graphs import BELADY_REFERENCE_STRING, collect_fault_curves, main, plot_fault_curves


def test_fifo_curve_shows_belady_anomaly():
    results = collect_fault_curves(BELADY_REFERENCE_STRING, range(1, 6))
    assert results['FIFO'] == [12, 12, 9, 10, 5]
    assert results['LRU'] == [12, 12, 10, 8, 5]
    assert set(results) == {'FIFO', 'LRU', 'LFU'}


def test_curves_never_below_distinct_pages():
    results = collect_fault_curves([0, 1, 0, 2, 0, 1], [1, 2, 3], algorithms=['LFU'])
    assert all(faults >= 3 for faults in results['LFU'])
    assert results['LFU'][-1] == 3


def test_plot_writes_file(tmp_path):
    output = tmp_path / 'curves.png'
    results = collect_fault_curves(BELADY_REFERENCE_STRING, [1, 2, 3])
    assert plot_fault_curves([1, 2, 3], results, output=str(output)) == str(output)
    assert output.exists()


def test_main_uses_file(tmp_path, monkeypatch, capsys):
    refs = tmp_path / 'refs.txt'
    refs.write_text("0 1 2 0 1 3\n")
    monkeypatch.chdir(tmp_path)
    main([str(refs)])
    assert (tmp_path / 'algorithm_comparison.png').exists()
    assert 'Graph saved' in capsys.readouterr().out


def test_main_reports_too_many_pages(tmp_path, monkeypatch, capsys):
    refs = tmp_path / 'refs.txt'
    refs.write_text(" ".join(str(page) for page in range(101)) + "\n")
    monkeypatch.chdir(tmp_path)
    assert main([str(refs)]) == 1
    assert 'Error:' in capsys.readouterr().out
    assert not (tmp_path / 'algorithm_comparison.png').exists()


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.txt')]) == 1
    assert 'Error:' in capsys.readouterr().out
