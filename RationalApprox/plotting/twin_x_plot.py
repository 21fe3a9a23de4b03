from matplotlib import pyplot as plt


def twin_x_plot(x, y_data, y_approx, residual, x_label=None, y_label=None, plot_ax=None):
    """Plot a trace and its rational approximation on the left axis, the residual on a twin
    right axis. Returns (fig, ax1, ax2); fig is None when plot_ax is given."""
    if plot_ax is None:
        fig, ax1 = plt.subplots(figsize=(8, 5))
    else:
        ax1 = plot_ax
        fig = None
    ax1.set_xlabel(x_label)
    ax1.set_ylabel(y_label, color="C0")
    ax1.tick_params(axis='y', labelcolor="C0")
    ax1.plot(x, y_data, ".", color="C0", label="data")
    ax1.plot(x, y_approx, "--", color="k", label="fraction")
    ax2 = ax1.twinx()
    ax2.plot(x, residual, color="C1")
    ax2.set_ylabel("residual", color="C1")
    ax2.tick_params(axis='y', labelcolor="C1")
    return fig, ax1, ax2
