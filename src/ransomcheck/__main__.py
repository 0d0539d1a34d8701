"""ransomcheckのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from ransomcheck.cli import run

    run()
